from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from joybase import labels
from joybase.exceptions import ConfigurationError


@dataclass(frozen=True)
class AxisMapping:
    """Semantic axis name ("x", "y", "z") to index in ``JoyFrame.axes``."""

    indices: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_config(cls, name: str, raw: Any, allowed_axes: Iterable[str]) -> 'AxisMapping':
        """
        Validate a raw ``{axis: index}`` object from the configuration.

        Raises:
            ConfigurationError: unknown axis names or indices that are not non-negative integers
        """
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise ConfigurationError(labels.CONFIG_INVALID_MAP.format(name, raw))

        allowed = tuple(allowed_axes)
        indices = {}
        for axis_name, index in raw.items():
            if axis_name not in allowed:
                raise ConfigurationError(labels.CONFIG_UNKNOWN_AXIS.format(name, axis_name, ', '.join(allowed)))
            if isinstance(index, bool) or not isinstance(index, int) or index < 0:
                raise ConfigurationError(labels.CONFIG_INVALID_INDEX.format(f'{name}.{axis_name}', index))
            indices[axis_name] = index

        return cls(indices)

    def index_of(self, axis_name: str) -> Optional[int]:
        return self.indices.get(axis_name)
