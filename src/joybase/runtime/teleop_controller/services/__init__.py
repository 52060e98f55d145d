from .command_composer import MotionMappings, compose
from .deadman_gate import is_open
from .input_mapper import resolve_axis
from .velocity_scaler import VelocityScaler, adjust, scale_requested

__all__ = [
    "MotionMappings",
    "VelocityScaler",
    "adjust",
    "compose",
    "is_open",
    "resolve_axis",
    "scale_requested",
]
