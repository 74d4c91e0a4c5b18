"""Strategy contracts and a couple of stock strategies.

A graphic delegates all rendering and idle animation to plain callables:

- draw: ``(graphic) -> None``, called with the origin translated to the graphic
- idling: ``(graphic) -> None``, called once per update while idling
- hover detector: ``(graphic, local_x, local_y) -> bool``
- hover listener: ``(graphic) -> None``, called once per update while hovered
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING, Callable

from .geometry import as_point

if TYPE_CHECKING:
    from .graphic import KineticGraphic
    from .host import HostEnvironment


DrawStrategy = Callable[["KineticGraphic"], None]
IdlingStrategy = Callable[["KineticGraphic"], None]
HoverDetector = Callable[["KineticGraphic", float, float], bool]
HoverListener = Callable[["KineticGraphic"], None]


def radius_hover_detector(radius: float = 10.0) -> HoverDetector:
    """Detector that reports a hover when the cursor is within ``radius``.

    Example:
        >>> detect = radius_hover_detector(10)
        >>> detect(None, 5, 0)
        True
    """
    def detect(graphic, local_mouse_x: float, local_mouse_y: float) -> bool:
        return math.hypot(local_mouse_x, local_mouse_y) < radius
    return detect


def bob_idling_strategy(
    host: "HostEnvironment",
    amplitude: float = 10.0,
    period_ms: float = 200.0
) -> IdlingStrategy:
    """Idle animation that bobs the graphic up and down above its target.

    Args:
        host: Clock source for the oscillation.
        amplitude: Peak vertical offset in distance units.
        period_ms: Time scale of the sine wave (radians per ``period_ms``).

    Returns:
        Idling strategy that only moves the position, never the target.
    """
    def bob(graphic: "KineticGraphic") -> None:
        anchor = as_point(graphic.get_target_pos())
        offset_y = math.sin(host.now() / period_ms) * amplitude
        graphic.set_pos((anchor[0], anchor[1] - offset_y))
    return bob
