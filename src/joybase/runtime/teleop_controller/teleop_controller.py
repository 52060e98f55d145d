import queue
import signal
import sys
import time
from typing import Callable, Optional

from joybase import labels
from joybase.configuration import TeleopParameters
from joybase.constants import ABORT_DRAIN_TIMEOUT, FRAME_WAIT_TIMEOUT
from joybase.logger import Logger
from joybase.runtime.joy_frame import JoyFrame
from joybase.runtime.messaging import MessageAbortCommand, MessageBus, MessageTopic
from joybase.runtime.teleop_controller.models import VelocityCommand
from joybase.runtime.teleop_controller.services import (
    MotionMappings,
    VelocityScaler,
    compose,
    is_open,
    scale_requested,
)

log = Logger().setup_logger('Teleop controller')

CommandSink = Callable[[VelocityCommand], None]


class TeleopController:
    """
    Turns joystick frames into velocity commands for the base.

    Motion is only commanded while the deadman button is held; releasing it
    commands zero velocity. While the deadman is held the speed buttons scale
    every velocity component, and a frame that adjusts the scale repeats the
    previous command instead of reading the sticks.

    Exactly one command is sent to ``sink`` per processed frame.
    """

    def __init__(
        self,
        parameters: TeleopParameters,
        sink: Optional[CommandSink] = None,
        clock: Callable[[], float] = time.monotonic,
        message_bus: Optional[MessageBus] = None,
    ):
        log.debug(labels.TELEOP_STARTING_CONTROLLER)

        self._buttons = parameters.buttons
        self._mappings = MotionMappings(parameters.position_map, parameters.orientation_map)
        self._scaler = VelocityScaler(parameters.scale)
        self._clock = clock

        self._message_bus = message_bus
        if sink is None:
            if self._message_bus is None:
                self._message_bus = MessageBus()
            sink = self._publish_to_bus
        self._sink = sink

        self._last_command = VelocityCommand.zero()
        self._gate_was_open = False

    @property
    def scale(self) -> float:
        return self._scaler.scale

    @property
    def last_command(self) -> VelocityCommand:
        return self._last_command

    def process_frame(self, frame: JoyFrame, now: Optional[float] = None) -> VelocityCommand:
        """Compute, emit and return the command for one frame."""
        gate_open = is_open(frame, self._buttons)
        self._log_gate_transition(gate_open)

        scaling = gate_open and scale_requested(frame, self._buttons)
        if scaling:
            self._scaler.adjust(frame, self._buttons, self._clock() if now is None else now)

        command = compose(
            frame,
            self._mappings,
            self._scaler.scale,
            gate_open,
            scaling=scaling,
            previous=self._last_command,
        )
        self._emit(command)
        return command

    def stop(self) -> VelocityCommand:
        """Emit the zero command regardless of input."""
        self._gate_was_open = False
        command = VelocityCommand.zero()
        self._emit(command)
        return command

    def _emit(self, command: VelocityCommand) -> None:
        self._last_command = command
        self._sink(command)
        log.info(labels.TELEOP_PUBLISHED.format(command.linear_x, command.linear_y, command.angular_z))

    def _log_gate_transition(self, gate_open: bool) -> None:
        if gate_open and not self._gate_was_open:
            log.info(labels.TELEOP_DEADMAN_PRESSED)
        elif not gate_open and self._gate_was_open:
            log.info(labels.TELEOP_DEADMAN_RELEASED)
        self._gate_was_open = gate_open

    def _publish_to_bus(self, command: VelocityCommand) -> None:
        self._message_bus.publish_latest(MessageTopic.CMD_VEL, command)

    def exit_gracefully(self, _signum, _frame):
        self.stop()
        log.info(labels.TELEOP_TERMINATED)
        sys.exit(0)

    def _drain_frames(self) -> int:
        """Discard every joystick frame still waiting on the queue."""
        dropped = 0
        while True:
            try:
                self._message_bus.get(MessageTopic.JOY, timeout=ABORT_DRAIN_TIMEOUT)
            except queue.Empty:
                return dropped
            dropped += 1

    def _handle_abort(self) -> None:
        """
        Stop the platform for a lost joystick.

        Frames queued before the abort were read from the lost device, so they
        are dropped instead of being allowed to command motion again.
        """
        log.warning(labels.TELEOP_ABORT_RECEIVED)
        dropped = self._drain_frames()
        if dropped:
            log.info(labels.TELEOP_ABORT_DROPPED.format(dropped))
        self.stop()

    def process_next(self) -> bool:
        """
        One iteration of the process loop.

        Returns:
            True when a frame was processed.
        """
        try:
            abort = self._message_bus.get(MessageTopic.ABORT, block=False)
        except queue.Empty:
            abort = None

        if abort == MessageAbortCommand.ABORT:
            self._handle_abort()
            return False

        try:
            frame = self._message_bus.get(MessageTopic.JOY, timeout=FRAME_WAIT_TIMEOUT)
        except queue.Empty:
            return False

        self.process_frame(frame)
        return True

    def do_process_events_from_queues(self) -> None:
        """
        Process loop: one frame at a time, in arrival order, until terminated.

        An abort from the remote controller stops the platform before the
        next frame is read.
        """
        if self._message_bus is None:
            self._message_bus = MessageBus()

        signal.signal(signal.SIGINT, self.exit_gracefully)
        signal.signal(signal.SIGTERM, self.exit_gracefully)

        while True:
            try:
                self.process_next()
            except Exception as e:
                log.error(labels.TELEOP_QUEUE_ERROR.format(e))
                self.stop()
                raise
