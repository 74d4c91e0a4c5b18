"""Point and vector helpers for the motion engine.

Positions are stored as ``float64`` numpy arrays of shape ``(2,)``. Callers may
hand in anything that looks like a point:

- a ``(x, y)`` tuple or list
- a numpy array
- any object exposing ``.x`` and ``.y`` attributes

:func:`as_point` always returns a fresh array, so the engine never shares
storage with the caller.
"""

from __future__ import annotations
import numpy as np
from typing import Any


def as_point(p: Any) -> np.ndarray:
    """Return an independent ``float64`` copy of a 2D point.

    Args:
        p: Sequence, numpy array or object with ``x``/``y`` attributes.

    Returns:
        New array of shape ``(2,)``.

    Example:
        >>> a = np.array([1.0, 2.0])
        >>> b = as_point(a)
        >>> b[0] = 99.0
        >>> a[0]
        1.0
    """
    if hasattr(p, "x") and hasattr(p, "y"):
        return np.array([p.x, p.y], dtype=np.float64)
    arr = np.array(p, dtype=np.float64).reshape(-1)
    if arr.shape != (2,):
        raise ValueError(f"Expected a 2D point, got shape {arr.shape}")
    return arr


def magnitude(v: np.ndarray) -> float:
    """Euclidean length of ``v``."""
    return float(np.hypot(v[0], v[1]))


def normalize(v: np.ndarray) -> np.ndarray:
    """Unit vector in the direction of ``v``. A zero vector stays zero."""
    n = magnitude(v)
    if n < 1e-12:
        return np.zeros(2, dtype=np.float64)
    return np.asarray(v, dtype=np.float64) / n


def linear_map(
    value: float,
    domain_low: float,
    domain_high: float,
    range_low: float,
    range_high: float
) -> float:
    """Re-map ``value`` from one range to another (unclamped).

    Args:
        value: Input value.
        domain_low: Input value that maps to ``range_low``.
        domain_high: Input value that maps to ``range_high``.
        range_low: Output for ``domain_low``.
        range_high: Output for ``domain_high``.

    Returns:
        Linearly interpolated (or extrapolated) output.

    Example:
        >>> linear_map(60, 120, 0, 1000, 10)
        505.0

    Note:
        ``domain_low == domain_high`` divides by zero; callers only map values
        that fall strictly inside a non-empty band.
    """
    t = (value - domain_low) / (domain_high - domain_low)
    return float(range_low + t * (range_high - range_low))


def step_toward(pos: np.ndarray, target: np.ndarray, max_dist: float) -> np.ndarray:
    """Move ``pos`` toward ``target`` by at most ``max_dist``.

    The step is clamped to the remaining distance, so the result never
    passes ``target``.

    Args:
        pos: Current point.
        target: Destination point.
        max_dist: Distance budget for this step (negative is treated as zero).

    Returns:
        New point as a ``float64`` array.
    """
    diff = np.asarray(target, dtype=np.float64) - pos
    dist = magnitude(diff)
    travel = min(max(max_dist, 0.0), dist)
    return pos + normalize(diff) * travel
