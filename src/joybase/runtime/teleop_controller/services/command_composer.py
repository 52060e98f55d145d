from dataclasses import dataclass

from joybase.runtime.joy_frame import JoyFrame
from joybase.runtime.teleop_controller.models import AxisMapping, VelocityCommand
from joybase.runtime.teleop_controller.services.input_mapper import resolve_axis


@dataclass(frozen=True)
class MotionMappings:
    """Translational (x, y) and rotational (z) axis mappings."""

    position: AxisMapping
    orientation: AxisMapping


def compose(
    frame: JoyFrame,
    mappings: MotionMappings,
    scale: float,
    gate_open: bool,
    scaling: bool = False,
    previous: VelocityCommand = VelocityCommand(),
) -> VelocityCommand:
    """
    Velocity command for one frame.

    A closed gate always yields the zero command. While the frame is adjusting
    the scale the motion is not recomputed and ``previous`` is returned as is.
    """
    if not gate_open:
        return VelocityCommand.zero()

    if scaling:
        return previous

    return VelocityCommand(
        linear_x=scale * resolve_axis(frame, mappings.position, 'x'),
        linear_y=scale * resolve_axis(frame, mappings.position, 'y'),
        angular_z=scale * resolve_axis(frame, mappings.orientation, 'z'),
    )
