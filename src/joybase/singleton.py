"""
Metaclass for process-wide single instances (logger, message bus).
"""

from typing import Any, Dict


class Singleton(type):
    """
    Returns the same instance for every call on a class using this metaclass.

    Instances created before a fork are shared with the child processes,
    which is how the controllers reach the same message bus queues.
    """

    _instances: Dict[type, Any] = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    def clear_instance(cls) -> None:
        """Forget the instance so the next call builds a new one."""
        cls._instances.pop(cls, None)


__all__ = [
    'Singleton',
]
