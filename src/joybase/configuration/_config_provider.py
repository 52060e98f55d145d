"""
Operator configuration, read once at startup from a JSON file.

Values are addressed with jmespath expressions so the file layout can change
without touching the code that consumes the parameters.
"""

from dataclasses import dataclass
from importlib import resources
import json
from pathlib import Path
import shutil
from typing import Any, Optional, Union

import jmespath

from joybase import labels
from joybase.constants import (
    CONFIG_FILE_NAME,
    DEADZONE,
    DEFAULT_COMMAND_OUTPUT,
    DEFAULT_CONFIG_RESOURCE,
    DEFAULT_DEVICE_NAME,
    DEFAULT_ENABLE_MOVE_BUTTON,
    DEFAULT_INITIAL_SCALE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOGS_FOLDER,
    DEFAULT_MIN_SCALE,
    DEFAULT_SCALE_COOLDOWN,
    ORIENTATION_AXES,
    POSITION_AXES,
    PUBLISH_RATE_HZ,
    UNASSIGNED,
)
from joybase.exceptions import ConfigurationError
from joybase.logger import Logger
from joybase.runtime.teleop_controller.models import AxisMapping, ButtonMapping, ScaleState

log = Logger().setup_logger('Configuration')

PathLike = Union[str, Path]


@dataclass(frozen=True)
class TeleopParameters:
    """Everything the teleop controller needs, validated."""

    buttons: ButtonMapping
    position_map: AxisMapping
    orientation_map: AxisMapping
    scale: ScaleState


@dataclass(frozen=True)
class RemoteParameters:
    """Joystick device settings for the remote controller process."""

    device: str = DEFAULT_DEVICE_NAME
    deadzone: float = DEADZONE
    publish_rate_hz: float = PUBLISH_RATE_HZ


@dataclass(frozen=True)
class BaseParameters:
    """Where the base controller writes velocity commands; '-' is standard output."""

    output: str = DEFAULT_COMMAND_OUTPUT


@dataclass(frozen=True)
class LoggingParameters:
    folder: str = DEFAULT_LOGS_FOLDER
    level: str = DEFAULT_LOG_LEVEL


class ConfigProvider:
    TELEOP_ENABLE_MOVE = 'teleop_controller.enable_move'
    TELEOP_INCREMENT_VELOCITY = 'teleop_controller.increment_velocity'
    TELEOP_DECREMENT_VELOCITY = 'teleop_controller.decrement_velocity'
    TELEOP_AXIS_POSITION_MAP = 'teleop_controller.axis_position_map'
    TELEOP_AXIS_ORIENTATION_MAP = 'teleop_controller.axis_orientation_map'
    TELEOP_MAX_DISPLACEMENT = 'teleop_controller.max_displacement_in_a_second'
    TELEOP_MIN_SCALE = 'teleop_controller.min_scale'
    TELEOP_INITIAL_SCALE = 'teleop_controller.initial_scale'
    TELEOP_COOLDOWN = 'teleop_controller.cooldown'

    REMOTE_DEVICE = 'remote_controller.device'
    REMOTE_DEADZONE = 'remote_controller.deadzone'
    REMOTE_PUBLISH_RATE_HZ = 'remote_controller.publish_rate_hz'

    BASE_OUTPUT = 'base_controller.output'

    LOGGING_FOLDER = 'logging.folder'
    LOGGING_LEVEL = 'logging.level'

    LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

    def __init__(self, values: dict):
        self.values = values

    @classmethod
    def from_file(cls, path: Optional[PathLike] = None) -> 'ConfigProvider':
        """
        Load the JSON configuration.

        Without ``path`` the file ``~/joybase.json`` is used, created from the
        bundled defaults when it does not exist yet.

        Raises:
            ConfigurationError: the file is missing or is not valid JSON
        """
        if path is None:
            path = Path.home() / CONFIG_FILE_NAME
            if not path.exists():
                default = resources.files('joybase.configuration') / DEFAULT_CONFIG_RESOURCE
                log.info(labels.CONFIG_COPY_DEFAULT.format(path, default))
                with resources.as_file(default) as default_path:
                    shutil.copyfile(default_path, path)

        path = Path(path)
        if not path.exists():
            raise ConfigurationError(labels.CONFIG_NOT_FOUND.format(path))

        try:
            with open(path, 'r', encoding='utf-8') as json_file:
                values = json.load(json_file)
        except json.JSONDecodeError as e:
            raise ConfigurationError(labels.CONFIG_INVALID_JSON.format(path, e)) from e

        log.info(labels.CONFIG_LOADED.format(path))
        return cls(values)

    def get(self, search_pattern: str, default: Any = None) -> Any:
        value = jmespath.search(search_pattern, self.values)
        log.debug(search_pattern + ': ' + str(value))
        return default if value is None else value

    def get_required(self, search_pattern: str) -> Any:
        value = jmespath.search(search_pattern, self.values)
        if value is None:
            raise ConfigurationError(labels.CONFIG_MISSING_VALUE.format(search_pattern))
        return value

    def get_float(self, search_pattern: str, default: Optional[float] = None) -> float:
        if default is None:
            value = self.get_required(search_pattern)
        else:
            value = self.get(search_pattern, default)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(labels.CONFIG_INVALID_NUMBER.format(search_pattern, value))
        return float(value)

    def get_button(self, search_pattern: str, default: int) -> int:
        value = self.get(search_pattern, default)
        if isinstance(value, bool) or not isinstance(value, int) or value < UNASSIGNED:
            raise ConfigurationError(labels.CONFIG_INVALID_BUTTON.format(search_pattern, UNASSIGNED, value))
        return value

    def teleop_parameters(self) -> TeleopParameters:
        """
        Raises:
            ConfigurationError: missing maximum scale, bad indices or inconsistent scale bounds
        """
        buttons = ButtonMapping(
            enable_move=self.get_button(self.TELEOP_ENABLE_MOVE, DEFAULT_ENABLE_MOVE_BUTTON),
            increment_speed=self.get_button(self.TELEOP_INCREMENT_VELOCITY, UNASSIGNED),
            decrement_speed=self.get_button(self.TELEOP_DECREMENT_VELOCITY, UNASSIGNED),
        )
        position_map = AxisMapping.from_config(
            self.TELEOP_AXIS_POSITION_MAP, self.get(self.TELEOP_AXIS_POSITION_MAP), POSITION_AXES
        )
        orientation_map = AxisMapping.from_config(
            self.TELEOP_AXIS_ORIENTATION_MAP, self.get(self.TELEOP_AXIS_ORIENTATION_MAP), ORIENTATION_AXES
        )
        scale = ScaleState(
            current_scale=self.get_float(self.TELEOP_INITIAL_SCALE, DEFAULT_INITIAL_SCALE),
            max_scale=self.get_float(self.TELEOP_MAX_DISPLACEMENT),
            min_scale=self.get_float(self.TELEOP_MIN_SCALE, DEFAULT_MIN_SCALE),
            cooldown=self.get_float(self.TELEOP_COOLDOWN, DEFAULT_SCALE_COOLDOWN),
        )
        scale.validate()

        return TeleopParameters(buttons, position_map, orientation_map, scale)

    def remote_parameters(self) -> RemoteParameters:
        return RemoteParameters(
            device=str(self.get(self.REMOTE_DEVICE, DEFAULT_DEVICE_NAME)),
            deadzone=self.get_float(self.REMOTE_DEADZONE, DEADZONE),
            publish_rate_hz=self.get_float(self.REMOTE_PUBLISH_RATE_HZ, PUBLISH_RATE_HZ),
        )

    def base_parameters(self) -> BaseParameters:
        return BaseParameters(output=str(self.get(self.BASE_OUTPUT, DEFAULT_COMMAND_OUTPUT)))

    def logging_parameters(self) -> LoggingParameters:
        """
        Raises:
            ConfigurationError: the level is not a standard logging level name
        """
        level = str(self.get(self.LOGGING_LEVEL, DEFAULT_LOG_LEVEL)).upper()
        if level not in self.LOG_LEVELS:
            raise ConfigurationError(labels.CONFIG_INVALID_LOG_LEVEL.format(level))

        return LoggingParameters(folder=str(self.get(self.LOGGING_FOLDER, DEFAULT_LOGS_FOLDER)), level=level)


def load_teleop_parameters(path: Optional[PathLike] = None) -> TeleopParameters:
    return ConfigProvider.from_file(path).teleop_parameters()


def load_remote_parameters(path: Optional[PathLike] = None) -> RemoteParameters:
    return ConfigProvider.from_file(path).remote_parameters()


def load_base_parameters(path: Optional[PathLike] = None) -> BaseParameters:
    return ConfigProvider.from_file(path).base_parameters()
