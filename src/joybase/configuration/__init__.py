from joybase.exceptions import ConfigurationError

from ._config_provider import (
    BaseParameters,
    ConfigProvider,
    LoggingParameters,
    RemoteParameters,
    TeleopParameters,
    load_base_parameters,
    load_remote_parameters,
    load_teleop_parameters,
)

__all__ = [
    "BaseParameters",
    "ConfigProvider",
    "ConfigurationError",
    "LoggingParameters",
    "RemoteParameters",
    "TeleopParameters",
    "load_base_parameters",
    "load_remote_parameters",
    "load_teleop_parameters",
]
