"""Host environments that feed the motion engine time, pointer and transforms.

A :class:`KineticGraphic` never reaches for globals. Everything it needs from
the outside world comes through a :class:`HostEnvironment`:

- ``now()``: monotonic time in milliseconds
- ``pointer_position()``: cursor ``(x, y)`` in the same space as positions
- ``push()`` / ``pop()`` / ``translate(x, y)``: scoped drawing transform

Two implementations are provided. :class:`SimulatedHost` is an explicit,
manually clocked instance for tests and headless simulation.
:class:`DesktopHost` reads the wall clock and the OS cursor.
"""

from __future__ import annotations

import time
from typing import Callable, List, Optional, Protocol, Tuple

import numpy as np

# Optional: only DesktopHost's default pointer source needs it
try:
    import win32api
except ImportError:
    win32api = None


class HostEnvironment(Protocol):
    def now(self) -> float: ...

    def pointer_position(self) -> Tuple[float, float]: ...

    def push(self) -> None: ...

    def pop(self) -> None: ...

    def translate(self, x: float, y: float) -> None: ...


class _TransformStack:
    """Drawing origin with save/restore semantics.

    Draw strategies render relative to :attr:`origin`; ``push`` saves it and
    ``pop`` restores the last saved value.
    """

    def __init__(self):
        self._origin = np.zeros(2, dtype=np.float64)
        self._saved: List[np.ndarray] = []

    @property
    def origin(self) -> np.ndarray:
        return self._origin.copy()

    @property
    def depth(self) -> int:
        return len(self._saved)

    def push(self) -> None:
        self._saved.append(self._origin.copy())

    def pop(self) -> None:
        if not self._saved:
            raise RuntimeError("pop() called without a matching push()")
        self._origin = self._saved.pop()

    def translate(self, x: float, y: float) -> None:
        self._origin = self._origin + np.array([x, y], dtype=np.float64)


class SimulatedHost(_TransformStack):
    """Host with an explicit clock and pointer.

    Args:
        start_ms: Initial clock reading in milliseconds.
        pointer: Initial pointer position.

    Example:
        >>> host = SimulatedHost()
        >>> host.advance(16)
        16.0
        >>> host.move_pointer(5, 0)
        >>> host.pointer_position()
        (5.0, 0.0)
    """

    def __init__(self, start_ms: float = 0.0, pointer: Tuple[float, float] = (0.0, 0.0)):
        super().__init__()
        self._now = float(start_ms)
        self._pointer = (float(pointer[0]), float(pointer[1]))

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError(f"Clock cannot run backwards (advance by {ms})")
        self._now += float(ms)
        return self._now

    def set_time(self, ms: float) -> None:
        if ms < self._now:
            raise ValueError(f"Clock cannot run backwards ({ms} < {self._now})")
        self._now = float(ms)

    def pointer_position(self) -> Tuple[float, float]:
        return self._pointer

    def move_pointer(self, x: float, y: float) -> None:
        self._pointer = (float(x), float(y))


class DesktopHost(_TransformStack):
    """Host backed by the wall clock and the OS cursor.

    The cursor is read with ``win32api`` by default, which requires
    'pywin32'. Pass ``pointer_source`` to read it from elsewhere, such as a
    GUI toolkit's mouse state.
    """

    def __init__(self, pointer_source: Optional[Callable[[], Tuple[float, float]]] = None):
        super().__init__()
        if pointer_source is None:
            if win32api is None:
                raise ImportError("win32api is required for DesktopHost. Please install 'pywin32'.")
            pointer_source = win32api.GetCursorPos
        self._pointer_source = pointer_source

    def now(self) -> float:
        return time.perf_counter() * 1000.0

    def pointer_position(self) -> Tuple[float, float]:
        x, y = self._pointer_source()
        return float(x), float(y)
