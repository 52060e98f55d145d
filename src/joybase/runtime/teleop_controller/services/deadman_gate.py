from joybase.runtime.joy_frame import JoyFrame
from joybase.runtime.teleop_controller.models import ButtonMapping


def is_open(frame: JoyFrame, buttons: ButtonMapping) -> bool:
    """True while the deadman (enable move) button is held."""
    return frame.button(buttons.enable_move)
