"""Remote controller package for joystick device handling."""

from .remote_control_service import RemoteControlService
from .remote_controller import RemoteControllerController

__all__ = [
    'RemoteControllerController',
    'RemoteControlService',
]
