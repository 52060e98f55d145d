"""
This module defines the JoyFrame dataclass, one poll of the joystick.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class JoyFrame:
    """Axes and buttons of the joystick at one instant, accessed by index."""

    axes: Tuple[float, ...] = ()
    buttons: Tuple[bool, ...] = ()

    @classmethod
    def of(cls, axes: Sequence[float] = (), buttons: Sequence[int] = ()) -> 'JoyFrame':
        """Build a frame from any sequences; buttons may be 0/1 integers."""
        return cls(tuple(float(a) for a in axes), tuple(bool(b) for b in buttons))

    def axis(self, index: int) -> float:
        """Value of the axis at ``index``, 0.0 when the frame has no such axis."""
        if 0 <= index < len(self.axes):
            return self.axes[index]
        return 0.0

    def button(self, index: int) -> bool:
        """State of the button at ``index``; unassigned or missing buttons read as released."""
        if 0 <= index < len(self.buttons):
            return self.buttons[index]
        return False
