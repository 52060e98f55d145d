from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class VelocityCommand:
    """Planar velocity for the base: linear x/y and angular z."""

    linear_x: float = 0.0
    linear_y: float = 0.0
    angular_z: float = 0.0

    @classmethod
    def zero(cls) -> 'VelocityCommand':
        return cls()

    def is_zero(self) -> bool:
        return self.linear_x == 0.0 and self.linear_y == 0.0 and self.angular_z == 0.0

    def as_twist(self) -> Dict[str, Dict[str, float]]:
        """Twist-shaped dict; the components the base cannot use are always zero."""
        return {
            'linear': {'x': self.linear_x, 'y': self.linear_y, 'z': 0.0},
            'angular': {'x': 0.0, 'y': 0.0, 'z': self.angular_z},
        }
