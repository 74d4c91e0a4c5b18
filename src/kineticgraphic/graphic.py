"""Location-seeking graphic with an acceleration-limited speed profile.

This module provides :class:`KineticGraphic`, a small state machine that moves
a 2D position toward a commanded target, runs an optional idle animation while
stationary and reports cursor hover to an optional listener.

Example:
    Basic usage::

        from kineticgraphic import KineticGraphic, SimulatedHost

        host = SimulatedHost()
        graphic = KineticGraphic((0, 0), lambda g: None, host)
        graphic.go_to((100, 0))
        while not graphic.get_is_idling():
            host.advance(16)
            graphic.update()
"""

from __future__ import annotations
import logging
from typing import Any, Optional

import numpy as np

from .geometry import as_point, linear_map, magnitude, step_toward
from .host import HostEnvironment
from .strategies import DrawStrategy, HoverDetector, HoverListener, IdlingStrategy

log = logging.getLogger(__name__)


class KineticGraphic:
    """Graphic that travels toward a target position.

    Transit is modelled as 1D speed control along the straight line to the
    target:

    1. Speed grows by ``acceleration * elapsed`` and is capped at ``max_speed``
    2. Inside ``slow_down_radius`` a speed ceiling ramps linearly from
       ``max_speed`` (at the radius) down to ``min_speed`` (at the target)
    3. The step is clamped to the remaining distance, so there is no overshoot
    4. Within ``ARRIVAL_THRESHOLD`` the position snaps onto the target and the
       graphic returns to idling

    Speed is not reset by :meth:`go_to`; a redirect mid-flight keeps its
    momentum.

    Attributes:
        host: Environment supplying time, pointer and drawing transforms.
    """

    ARRIVAL_THRESHOLD = 1.0

    # Keys that are loaded from preset files
    PRESET_KEYS = ('min_speed', 'max_speed', 'acceleration', 'slow_down_radius')

    # Default values for preset parameters
    DEFAULT_PRESET = {
        'min_speed': 10.0,
        'max_speed': 1000.0,
        'acceleration': 700.0,
        'slow_down_radius': 120.0,
    }

    def __init__(
        self,
        pos: Any,
        draw_strategy: Optional[DrawStrategy],
        host: HostEnvironment,
        preset_file: Optional[str] = None
    ):
        """Create a new kinetic graphic.

        Args:
            pos: Starting position; also the initial target.
            draw_strategy: Callable used by :meth:`draw` to render the graphic.
            host: Host environment to read time and pointer from.
            preset_file: Optional path to a JSON file with motion parameters.
        """
        self.host = host

        self._pos = as_point(pos)
        self._target_pos = as_point(pos)
        self._idling = True
        self._speed = 0.0
        self._started_moving = False
        self._last_millis = host.now()
        self._hovering = False

        if preset_file is not None:
            self.preset = self._load_preset_file(preset_file)
        else:
            self.preset = self.DEFAULT_PRESET.copy()

        self._idling_strategy: Optional[IdlingStrategy] = None
        self._hover_listener: Optional[HoverListener] = None
        self._hover_detector: Optional[HoverDetector] = None
        self._draw_strategy = draw_strategy

    @staticmethod
    def _load_preset_file(filepath: str) -> dict:
        """Load motion parameters from a JSON file.

        Args:
            filepath: Path to the JSON file.

        Returns:
            Dictionary of parameter values merged with defaults.
        """
        import json

        preset = KineticGraphic.DEFAULT_PRESET.copy()

        with open(filepath, 'r') as f:
            data = json.load(f)

        supported = set(KineticGraphic.PRESET_KEYS)
        unknown = set(data.keys()) - supported
        if unknown:
            raise ValueError(f"Unknown parameters in preset file: {unknown}. Supported: {supported}")

        for key in KineticGraphic.PRESET_KEYS:
            if key in data:
                preset[key] = float(data[key])

        log.debug("Loaded motion preset from %s: %s", filepath, preset)
        return preset

    # -------------------- Tunables --------------------

    def set_min_speed(self, new_min_speed: float) -> None:
        """Speed (units per second) the ramp bottoms out at near the target."""
        self.preset['min_speed'] = new_min_speed

    def get_min_speed(self) -> float:
        return self.preset['min_speed']

    def set_max_speed(self, new_max_speed: float) -> None:
        """Speed cap in units per second."""
        self.preset['max_speed'] = new_max_speed

    def get_max_speed(self) -> float:
        return self.preset['max_speed']

    def set_acceleration(self, new_acceleration: float) -> None:
        """Acceleration in units per second squared."""
        self.preset['acceleration'] = new_acceleration

    def get_acceleration(self) -> float:
        return self.preset['acceleration']

    def set_slow_down_radius(self, new_slow_down_radius: float) -> None:
        """Distance from the target at which deceleration starts."""
        self.preset['slow_down_radius'] = new_slow_down_radius

    def get_slow_down_radius(self) -> float:
        return self.preset['slow_down_radius']

    @property
    def speed(self) -> float:
        return self._speed

    # -------------------- Strategies --------------------

    def set_idling_strategy(self, new_idling_strategy: Optional[IdlingStrategy]) -> None:
        """Set the "wait cycle" animation run while not in transit, or None."""
        self._idling_strategy = new_idling_strategy

    def clear_idling_strategy(self) -> None:
        self.set_idling_strategy(None)

    def set_hover_listener(self, new_hover_listener: Optional[HoverListener]) -> None:
        """Set the listener informed while the cursor hovers over this graphic.

        Listeners are only informed when a hover detector is also configured.
        """
        self._hover_listener = new_hover_listener

    def clear_hover_listener(self) -> None:
        self.set_hover_listener(None)

    def set_hover_detector(self, new_hover_detector: Optional[HoverDetector]) -> None:
        """Set the predicate that decides whether the cursor is over this graphic.

        Passing None disables hover detection and clears the hovering flag
        immediately.
        """
        self._hover_detector = new_hover_detector
        if new_hover_detector is None:
            self._hovering = False

    def clear_hover_detector(self) -> None:
        self.set_hover_detector(None)

    def set_draw_strategy(self, new_draw_strategy: Optional[DrawStrategy]) -> None:
        self._draw_strategy = new_draw_strategy

    # -------------------- Position --------------------

    def set_pos(self, new_pos: Any) -> None:
        self._pos = as_point(new_pos)

    def get_pos(self) -> np.ndarray:
        return self._pos.copy()

    def get_target_pos(self) -> np.ndarray:
        """Return the live target position. Treat it as read-only."""
        return self._target_pos

    def go_to(self, new_pos: Any) -> None:
        """Start navigating toward ``new_pos`` from the current position and speed."""
        self._idling = False
        self._target_pos = as_point(new_pos)
        self._started_moving = False
        log.debug("Heading to (%.2f, %.2f) at speed %.2f",
                  self._target_pos[0], self._target_pos[1], self._speed)

    def stop(self) -> None:
        """Stop navigating; the next update arrives in place and resumes idling."""
        self.go_to(self.get_pos())

    # -------------------- State queries --------------------

    def get_is_hovering(self) -> bool:
        """Whether the cursor was over this graphic at the last update.

        Meaningless unless a hover detector has been configured.
        """
        return self._hovering

    def get_is_idling(self) -> bool:
        return self._idling

    # -------------------- Frame loop --------------------

    def update(self, local_mouse_x: Optional[float] = None, local_mouse_y: Optional[float] = None) -> None:
        """Advance this graphic by one frame.

        If the cursor coordinates are omitted they are read from the host and
        made relative to the position at the start of this frame. Pass both
        coordinates or neither.
        """
        if (local_mouse_x is None) != (local_mouse_y is None):
            raise ValueError("update() needs both local_mouse_x and local_mouse_y, or neither")
        if local_mouse_x is None:
            mouse_x, mouse_y = self.host.pointer_position()
            local_mouse_x = mouse_x - self._pos[0]
            local_mouse_y = mouse_y - self._pos[1]
        self.update_with_mouse_pos(local_mouse_x, local_mouse_y)

    def update_with_mouse_pos(self, local_mouse_x: float, local_mouse_y: float) -> None:
        """Advance this graphic by one frame with an explicit cursor position.

        Args:
            local_mouse_x: Cursor x relative to this graphic's position.
            local_mouse_y: Cursor y relative to this graphic's position.
        """
        if self._idling_strategy is not None and self._idling:
            self._idling_strategy(self)

        if not self._idling:
            self._move_to_target_pos()

        if self._hover_detector is not None:
            self._hovering = bool(self._hover_detector(self, local_mouse_x, local_mouse_y))
            if self._hovering and self._hover_listener is not None:
                self._hover_listener(self)

    def draw(self) -> None:
        """Draw this graphic at its current position."""
        if self._draw_strategy is None:
            raise RuntimeError("KineticGraphic.draw() requires a draw strategy")

        self.host.push()
        try:
            self.host.translate(float(self._pos[0]), float(self._pos[1]))
            self._draw_strategy(self)
        finally:
            self.host.pop()

    def _move_to_target_pos(self) -> None:
        """Move toward the target position, changing speed if needed."""
        now = self.host.now()
        if not self._started_moving:
            # Fresh leg: don't count time spent idling
            self._started_moving = True
            self._last_millis = now

        diff = self._target_pos - self._pos
        dist = magnitude(diff)

        sec_diff = (now - self._last_millis) / 1000.0
        self._last_millis = now

        max_speed = self.preset['max_speed']
        self._speed = min(max(self._speed + sec_diff * self.preset['acceleration'], 0.0), max_speed)

        slow_down_radius = self.preset['slow_down_radius']
        if dist < slow_down_radius:
            ceiling = linear_map(dist, slow_down_radius, 0.0, max_speed, self.preset['min_speed'])
            self._speed = min(max(min(ceiling, self._speed), 0.0), max_speed)

        if dist < self.ARRIVAL_THRESHOLD:
            self._idling = True
            self._pos = self._target_pos.copy()
            log.debug("Arrived at (%.2f, %.2f)", self._pos[0], self._pos[1])
            return

        self._pos = step_toward(self._pos, self._target_pos, self._speed * sec_diff)
