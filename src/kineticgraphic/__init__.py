from .graphic import KineticGraphic
from .host import DesktopHost, HostEnvironment, SimulatedHost
from .simulation import simulate_transit
from .strategies import bob_idling_strategy, radius_hover_detector

__all__ = [
    "KineticGraphic",
    "HostEnvironment",
    "SimulatedHost",
    "DesktopHost",
    "simulate_transit",
    "radius_hover_detector",
    "bob_idling_strategy",
]
