import json
import sys
import time
from typing import TextIO

from joybase.constants import DEFAULT_COMMAND_OUTPUT
from joybase.runtime.teleop_controller.models import VelocityCommand


class CommandWriter:
    """
    Writes velocity commands as JSON lines in twist layout.

    The output may be a regular file, a named pipe read by the base driver,
    or standard output.
    """

    def __init__(self, stream: TextIO, name: str = DEFAULT_COMMAND_OUTPUT):
        self._stream = stream
        self.name = name

    @classmethod
    def open(cls, output: str = DEFAULT_COMMAND_OUTPUT) -> 'CommandWriter':
        if output == DEFAULT_COMMAND_OUTPUT:
            return cls(sys.stdout, output)
        return cls(open(output, 'a', buffering=1, encoding='utf-8'), output)

    def write(self, command: VelocityCommand) -> None:
        record = {
            "ts": time.time(),
            **command.as_twist(),
        }
        self._stream.write(json.dumps(record) + "\n")
        self._stream.flush()

    def close(self) -> None:
        if self._stream is not sys.stdout:
            self._stream.close()
