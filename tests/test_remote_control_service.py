"""Tests for the joystick device reader.

The device file is replaced by an in-memory buffer of js_event records.
"""

from __future__ import annotations

import io

import pytest

from joybase.runtime.joy_frame import JoyFrame
from joybase.runtime.remote_controller import RemoteControlService
from joybase.runtime.remote_controller._js_event import JS_EVENT_AXIS, JS_EVENT_BUTTON, JS_EVENT_INIT, JsEvent


def connected_service(*events: JsEvent, num_axes: int = 4, num_buttons: int = 6) -> RemoteControlService:
    service = RemoteControlService("js0", deadzone=0.05)
    service.configure_layout(num_axes, num_buttons)
    service.jsdev = io.BytesIO(b"".join(event.pack() for event in events))
    service.is_connected = True
    return service


class TestPollEvents:
    """Tests for decoding buffered events into the frame state."""

    def test_initial_frame_is_neutral(self) -> None:
        """A freshly opened device reads centered axes and released buttons."""
        service = connected_service()

        assert service.joy_frame() == JoyFrame((0.0,) * 4, (False,) * 6)

    def test_button_press_and_release(self) -> None:
        """Button events set and clear the button state."""
        service = connected_service(
            JsEvent(0, 1, JS_EVENT_BUTTON, 0),
            JsEvent(1, 1, JS_EVENT_BUTTON, 5),
            JsEvent(2, 0, JS_EVENT_BUTTON, 5),
        )

        assert service.poll_events() == 3
        assert service.joy_frame().buttons == (True, False, False, False, False, False)

    def test_axis_normalized_and_inverted(self) -> None:
        """Stick up (negative raw value) reads +1.0."""
        service = connected_service(
            JsEvent(0, -32767, JS_EVENT_AXIS, 1),
            JsEvent(0, 16384, JS_EVENT_AXIS, 3),
        )

        service.poll_events()

        frame = service.joy_frame()
        assert frame.axes[1] == pytest.approx(1.0)
        assert frame.axes[3] == pytest.approx(-16384 / 32767)

    def test_full_negative_range_clamped(self) -> None:
        """The raw -32768 reading does not exceed 1.0."""
        service = connected_service(JsEvent(0, -32768, JS_EVENT_AXIS, 0))

        service.poll_events()

        assert service.joy_frame().axes[0] == 1.0

    def test_deadzone_reads_zero(self) -> None:
        """Small stick drift is reported as centered."""
        service = connected_service(JsEvent(0, 1000, JS_EVENT_AXIS, 0))

        service.poll_events()

        assert service.joy_frame().axes[0] == 0.0

    def test_init_events_applied(self) -> None:
        """Initial-state events report buttons already held at open."""
        service = connected_service(JsEvent(0, 1, JS_EVENT_BUTTON | JS_EVENT_INIT, 2))

        service.poll_events()

        assert service.joy_frame().buttons[2] is True

    def test_unknown_numbers_ignored(self) -> None:
        """Events for indices beyond the layout are dropped."""
        service = connected_service(
            JsEvent(0, 1, JS_EVENT_BUTTON, 9),
            JsEvent(0, 32767, JS_EVENT_AXIS, 9),
        )

        service.poll_events()

        assert service.joy_frame() == JoyFrame((0.0,) * 4, (False,) * 6)

    def test_disconnected_service_reads_nothing(self) -> None:
        """Polling without a device is a no-op."""
        service = RemoteControlService("js0")

        assert service.poll_events() == 0
        assert service.joy_frame() == JoyFrame()


class TestDisconnect:
    """Tests for closing the device."""

    def test_disconnect_closes_device(self) -> None:
        """disconnect() closes the file and clears the connection flag."""
        service = connected_service()
        device = service.jsdev

        service.disconnect()

        assert device.closed
        assert service.jsdev is None
        assert service.is_connected is False
