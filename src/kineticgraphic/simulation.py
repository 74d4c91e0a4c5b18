"""Headless transit simulation on a manually clocked host."""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .graphic import KineticGraphic
from .host import SimulatedHost


def _no_draw(graphic: KineticGraphic) -> None:
    pass


def simulate_transit(
    start: Any,
    target: Any,
    *,
    frame_ms: float = 16.0,
    max_frames: int = 10000,
    preset: Optional[Dict[str, float]] = None,
    pointer: Tuple[float, float] = (0.0, 0.0),
) -> Tuple[np.ndarray, List[float], int, Dict[str, float]]:
    """Run a graphic from ``start`` to ``target`` at a fixed frame interval.

    Args:
        start: Starting position.
        target: Position passed to :meth:`KineticGraphic.go_to`.
        frame_ms: Simulated time between frames in milliseconds.
        max_frames: Upper bound on the number of frames executed.
        preset: Overrides for the motion parameters (see ``PRESET_KEYS``).
        pointer: Fixed cursor position seen by the host.

    Returns:
        Tuple containing:
            - path: (N, 2) array, the start position followed by one row per frame.
            - speeds: Speed after each row of ``path``.
            - frames: Number of frames executed.
            - params: Motion parameters actually used.

    Example:
        >>> path, speeds, frames, params = simulate_transit((0, 0), (100, 0))
        >>> path[-1]
        array([100.,   0.])
    """
    if frame_ms <= 0:
        raise ValueError(f"frame_ms must be positive, got {frame_ms}")

    overrides = dict(preset or {})
    unknown = set(overrides) - set(KineticGraphic.PRESET_KEYS)
    if unknown:
        raise ValueError(f"Unknown parameters: {unknown}. Supported: {set(KineticGraphic.PRESET_KEYS)}")

    host = SimulatedHost(pointer=pointer)
    graphic = KineticGraphic(start, _no_draw, host)
    graphic.preset.update({k: float(v) for k, v in overrides.items()})

    graphic.go_to(target)

    path: List[np.ndarray] = [graphic.get_pos()]
    speeds: List[float] = [graphic.speed]
    frames = 0
    while frames < max_frames and not graphic.get_is_idling():
        host.advance(frame_ms)
        graphic.update()
        frames += 1
        path.append(graphic.get_pos())
        speeds.append(graphic.speed)

    return np.vstack(path), speeds, frames, dict(graphic.preset)
