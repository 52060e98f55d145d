from .axis_mapping import AxisMapping
from .button_mapping import ButtonMapping
from .scale_state import ScaleState
from .velocity_command import VelocityCommand

__all__ = [
    "AxisMapping",
    "ButtonMapping",
    "ScaleState",
    "VelocityCommand",
]
