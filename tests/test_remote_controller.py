"""Tests for the remote controller process loop."""

from __future__ import annotations

import signal

import pytest

from joybase.configuration import RemoteParameters
from joybase.runtime.joy_frame import JoyFrame
from joybase.runtime.messaging import MessageAbortCommand, MessageTopic
from joybase.runtime.remote_controller import RemoteControllerController

from conftest import FakeMessageBus

FRAME = JoyFrame.of(axes=[0.5, 0.0], buttons=[1, 0])


class FakeRemoteControlService:
    """Joystick that yields frames until it fails with ``error``."""

    def __init__(self, polls_before_error: int = 0, error: Exception = None) -> None:
        self.polls_before_error = polls_before_error
        self.error = error
        self.is_connected = True
        self.polls = 0

    def poll_events(self) -> None:
        if self.error is not None and self.polls >= self.polls_before_error:
            raise self.error
        self.polls += 1

    def joy_frame(self) -> JoyFrame:
        return FRAME

    def disconnect(self) -> None:
        self.is_connected = False


def remote_controller(service: FakeRemoteControlService, bus: FakeMessageBus) -> RemoteControllerController:
    return RemoteControllerController(RemoteParameters(), remote_control_service=service, message_bus=bus)


class TestPollAndPublish:
    """Tests for one iteration of the reader loop."""

    def test_frame_published_when_due(self, message_bus: FakeMessageBus) -> None:
        """A due frame is put on JOY and the next publish time advances."""
        controller = remote_controller(FakeRemoteControlService(), message_bus)

        next_time = controller.poll_and_publish(0.0)

        assert message_bus.drain(MessageTopic.JOY) == [FRAME]
        assert next_time > 0.0

    def test_frame_held_until_due(self, message_bus: FakeMessageBus) -> None:
        """Events are polled but nothing is published before the due time."""
        service = FakeRemoteControlService()
        controller = remote_controller(service, message_bus)

        controller.poll_and_publish(float("inf"))

        assert service.polls == 1
        assert message_bus.drain(MessageTopic.JOY) == []


class TestRunConnected:
    """Tests for the connected loop."""

    def test_device_error_aborts_and_disconnects(self, message_bus: FakeMessageBus) -> None:
        """A lost device publishes ABORT and closes the device."""
        service = FakeRemoteControlService(polls_before_error=3, error=OSError(19, "No such device"))
        controller = remote_controller(service, message_bus)

        controller.run_connected()

        assert message_bus.drain(MessageTopic.ABORT) == [MessageAbortCommand.ABORT]
        assert service.is_connected is False

    def test_unexpected_error_aborts_and_disconnects(self, message_bus: FakeMessageBus) -> None:
        """Any other failure also stops the platform."""
        service = FakeRemoteControlService(error=ValueError("bad event"))
        controller = remote_controller(service, message_bus)

        controller.run_connected()

        assert message_bus.drain(MessageTopic.ABORT) == [MessageAbortCommand.ABORT]
        assert service.is_connected is False


class TestExitGracefully:
    """Tests for the signal handler."""

    def test_exit_disconnects(self, message_bus: FakeMessageBus) -> None:
        """Termination closes the joystick device."""
        service = FakeRemoteControlService()
        controller = remote_controller(service, message_bus)

        with pytest.raises(SystemExit):
            controller.exit_gracefully(signal.SIGINT, None)

        assert service.is_connected is False
