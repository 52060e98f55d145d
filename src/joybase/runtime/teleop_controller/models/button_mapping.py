from dataclasses import dataclass

from joybase.constants import DEFAULT_ENABLE_MOVE_BUTTON, UNASSIGNED


@dataclass(frozen=True)
class ButtonMapping:
    """Button indices of the deadman and speed controls; ``UNASSIGNED`` disables a control."""

    enable_move: int = DEFAULT_ENABLE_MOVE_BUTTON
    increment_speed: int = UNASSIGNED
    decrement_speed: int = UNASSIGNED
