"""
Logging setup shared by every joybase process.

Component loggers are children of the ``JoyBase`` logger, so handlers and the
level are set once on the parent. The log file is only opened when the
runtime applies the operator's logging settings; library use and tests log
through the standard propagation to the root logger.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from joybase import labels
from joybase.constants import DEFAULT_LOG_LEVEL, LOG_FILE_NAME
from joybase.singleton import Singleton

JOYBASE = 'JoyBase'


class Logger(metaclass=Singleton):
    """Owns the handlers of the ``JoyBase`` logger hierarchy."""

    def __init__(self):
        self._base = logging.getLogger(JOYBASE)
        self._base.setLevel(DEFAULT_LOG_LEVEL)
        self._formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        self.logging_stream_handler = logging.StreamHandler()
        self.logging_stream_handler.setFormatter(self._formatter)
        self.logging_file_handler: Optional[logging.FileHandler] = None

    def configure(self, logs_folder: Union[str, Path], level: str = DEFAULT_LOG_LEVEL) -> Path:
        """Set the level and (re)open the log file in ``logs_folder``; returns the file path."""
        self._base.setLevel(level)

        path = Path(logs_folder)
        path.mkdir(parents=True, exist_ok=True)
        path = path / LOG_FILE_NAME

        if self.logging_file_handler is not None:
            self._base.removeHandler(self.logging_file_handler)
            self.logging_file_handler.close()

        self.logging_file_handler = logging.FileHandler(path)
        self.logging_file_handler.setFormatter(self._formatter)
        self._base.addHandler(self.logging_file_handler)

        self._base.info(labels.LOG_FILE_ENABLED.format(path, level))
        return path

    def setup_logger(self, logger_name=None, enable_stream_handler=False):
        """Return the logger of a component.

        Args:
            logger_name (str, optional): Component name, a child of ``JoyBase``. Defaults to None.
            enable_stream_handler (bool): Also print the records of every component to the console.

        Returns:
            logging.Logger: The component logger.
        """
        logger = self._base.getChild(logger_name) if logger_name else self._base

        if enable_stream_handler and self.logging_stream_handler not in self._base.handlers:
            self._base.addHandler(self.logging_stream_handler)

        return logger
