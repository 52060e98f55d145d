import signal
import sys
import time
from typing import Optional

from joybase import labels
from joybase.configuration import RemoteParameters
from joybase.constants import DEVICE_SEARCH_INTERVAL, READ_LOOP_SLEEP
from joybase.logger import Logger
from joybase.runtime.messaging import MessageAbortCommand, MessageBus, MessageTopic

from .remote_control_service import RemoteControlService

log = Logger().setup_logger('Remote controller')


class RemoteControllerController:
    """Publishes the joystick state on the JOY topic at a steady rate."""

    def __init__(
        self,
        parameters: RemoteParameters,
        remote_control_service: Optional[RemoteControlService] = None,
        message_bus: Optional[MessageBus] = None,
    ):
        log.debug(labels.REMOTE_STARTING_CONTROLLER)

        if remote_control_service is None:
            remote_control_service = RemoteControlService(parameters.device, parameters.deadzone)
        self._remote_control_service = remote_control_service
        self._publish_period = 1.0 / parameters.publish_rate_hz
        self._message_bus = message_bus if message_bus is not None else MessageBus()

    def exit_gracefully(self, _signum, _frame):
        self._remote_control_service.disconnect()
        log.info(labels.REMOTE_TERMINATED)
        sys.exit(0)

    def _abort(self) -> None:
        """Ask the teleop process to stop the platform."""
        self._message_bus.put(MessageTopic.ABORT, MessageAbortCommand.ABORT)

    def poll_and_publish(self, next_publish_time: float) -> float:
        """
        Read pending device events and publish a frame once ``next_publish_time`` is reached.

        Returns:
            The time the following frame is due.
        """
        self._remote_control_service.poll_events()

        if time.time() >= next_publish_time:
            self._message_bus.put(MessageTopic.JOY, self._remote_control_service.joy_frame())
            next_publish_time += self._publish_period

        return next_publish_time

    def run_connected(self) -> None:
        """Publish frames until the device fails; the device is then closed and the teleop side aborted."""
        next_publish_time = time.time() + self._publish_period

        while True:
            try:
                next_publish_time = self.poll_and_publish(next_publish_time)
                time.sleep(READ_LOOP_SLEEP)

            except OSError as e:
                # device unplugged or out of range
                log.warning(labels.REMOTE_IO_ERROR.format(e))
                self._abort()
                self._remote_control_service.disconnect()
                return

            except Exception as e:
                log.error(labels.REMOTE_QUEUE_ERROR.format(e))
                self._abort()
                self._remote_control_service.disconnect()
                return

    def do_process_events_from_queues(self):
        """
        Main event loop. Frames are published at a steady rate so that the
        deadman button keeps the platform moving while the sticks are held.
        """
        signal.signal(signal.SIGINT, self.exit_gracefully)
        signal.signal(signal.SIGTERM, self.exit_gracefully)

        while True:
            if not self._remote_control_service.is_connected:
                if not self._remote_control_service.scan():
                    time.sleep(DEVICE_SEARCH_INTERVAL)
                    continue

            self.run_connected()
