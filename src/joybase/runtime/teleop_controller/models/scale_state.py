from dataclasses import dataclass, replace
from typing import Optional

from joybase import labels
from joybase.constants import DEFAULT_MIN_SCALE, DEFAULT_SCALE_COOLDOWN
from joybase.exceptions import ConfigurationError


@dataclass(frozen=True)
class ScaleState:
    """
    Velocity scale and its adjustment bounds.

    ``last_adjustment_time`` is None until the first applied adjustment.
    """

    current_scale: float
    max_scale: float
    min_scale: float = DEFAULT_MIN_SCALE
    cooldown: float = DEFAULT_SCALE_COOLDOWN
    last_adjustment_time: Optional[float] = None

    def validate(self) -> None:
        """
        Raises:
            ConfigurationError: non-positive minimum, maximum below minimum or negative cooldown
        """
        if self.min_scale <= 0:
            raise ConfigurationError(labels.CONFIG_MIN_SCALE.format(self.min_scale))
        if self.max_scale < self.min_scale:
            raise ConfigurationError(labels.CONFIG_SCALE_BOUNDS.format(self.max_scale, self.min_scale))
        if self.cooldown < 0:
            raise ConfigurationError(labels.CONFIG_NEGATIVE_COOLDOWN.format(self.cooldown))

    def in_bounds(self) -> bool:
        return self.min_scale <= self.current_scale <= self.max_scale

    def clamped(self) -> 'ScaleState':
        return replace(self, current_scale=max(self.min_scale, min(self.current_scale, self.max_scale)))

    def cooldown_elapsed(self, now: float) -> bool:
        return self.last_adjustment_time is None or now - self.last_adjustment_time >= self.cooldown
