from joybase.runtime.joy_frame import JoyFrame
from joybase.runtime.teleop_controller.models import AxisMapping


def resolve_axis(frame: JoyFrame, mapping: AxisMapping, axis_name: str) -> float:
    """
    Raw value of a semantic axis in ``frame``.

    An axis missing from the mapping, or mapped past the end of ``frame.axes``,
    reads as 0.0 so that a malformed frame never produces motion.
    """
    index = mapping.index_of(axis_name)
    if index is None:
        return 0.0
    return frame.axis(index)
