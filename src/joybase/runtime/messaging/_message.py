from enum import Enum
from typing import Union

from joybase.runtime.joy_frame import JoyFrame
from joybase.runtime.teleop_controller.models import VelocityCommand


class MessageTopic(Enum):
    ABORT = "abort"
    JOY = "joy"
    CMD_VEL = "cmd_vel"


class MessageAbortCommand(Enum):
    """Sent when the joystick is lost; the platform must stop."""

    ABORT = "abort"


MessagePayload = Union[MessageAbortCommand, JoyFrame, VelocityCommand]
