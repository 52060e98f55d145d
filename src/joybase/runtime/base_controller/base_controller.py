import queue
import signal
import sys
from typing import Optional

from joybase import labels
from joybase.configuration import BaseParameters
from joybase.constants import FRAME_WAIT_TIMEOUT
from joybase.logger import Logger
from joybase.runtime.messaging import MessageBus, MessageTopic
from joybase.runtime.teleop_controller.models import VelocityCommand

from .command_writer import CommandWriter

log = Logger().setup_logger('Base controller')


class BaseController:
    """Hands every command published on CMD_VEL to the base driver output."""

    def __init__(
        self,
        parameters: BaseParameters,
        writer: Optional[CommandWriter] = None,
        message_bus: Optional[MessageBus] = None,
    ):
        self._writer = writer if writer is not None else CommandWriter.open(parameters.output)
        self._message_bus = message_bus if message_bus is not None else MessageBus()
        log.info(labels.BASE_STARTING_CONTROLLER.format(self._writer.name))

    def exit_gracefully(self, _signum, _frame):
        self._writer.write(VelocityCommand.zero())
        self._writer.close()
        log.info(labels.BASE_TERMINATED)
        sys.exit(0)

    def forward_next(self) -> bool:
        """
        Write the next published command, if one arrives in time.

        Returns:
            True when a command was written.
        """
        try:
            command = self._message_bus.get(MessageTopic.CMD_VEL, timeout=FRAME_WAIT_TIMEOUT)
        except queue.Empty:
            return False

        try:
            self._writer.write(command)
        except OSError as e:
            log.error(labels.BASE_WRITE_ERROR.format(self._writer.name, e))
            raise
        return True

    def do_process_events_from_queues(self) -> None:
        signal.signal(signal.SIGINT, self.exit_gracefully)
        signal.signal(signal.SIGTERM, self.exit_gracefully)

        while True:
            try:
                self.forward_next()
            except Exception as e:
                log.error(labels.BASE_QUEUE_ERROR.format(e))
                raise
