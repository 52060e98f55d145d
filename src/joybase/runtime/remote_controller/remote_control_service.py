"""
Joystick device access for the remote controller process.

This service owns the device file and the live axis / button state; it can be
used without the queue-based process loop.
"""

import array
from fcntl import ioctl
import os
from typing import BinaryIO, List, Optional

from joybase import labels
from joybase.constants import (
    AXIS_NORMALIZATION_CONSTANT,
    DEADZONE,
    DEVICE_PATH,
    DEVICE_SEARCH_INTERVAL,
    JSDEV_READ_SIZE,
    JSIOCGAXES,
    JSIOCGBUTTONS,
    JSIOCGNAME,
)
from joybase.logger import Logger
from joybase.runtime.joy_frame import JoyFrame

from ._js_event import JS_EVENT_AXIS, JS_EVENT_BUTTON, JS_EVENT_INIT, JsEvent

log = Logger().setup_logger('Remote Control Service')


class RemoteControlService:
    """
    Reads a Linux joystick device (``/dev/input/jsN``) into JoyFrames.

    Axes are normalized to -1.0..1.0 with the sign inverted, so pushing a stick
    up or left reads positive, and values inside the deadzone read 0.0.
    Initial-state events sent by the driver on open are applied like any other.

    Attributes:
        device_name: The configured device name to search for (e.g., 'js0')
        is_connected: True while the device is open and its layout known
    """

    def __init__(self, device_name: str, deadzone: float = DEADZONE):
        self.device_name = device_name
        self.deadzone = deadzone
        self.jsdev: Optional[BinaryIO] = None
        self.is_connected = False
        self._axes: List[float] = []
        self._buttons: List[bool] = []

    def configure_layout(self, num_axes: int, num_buttons: int) -> None:
        """Reset the state to ``num_axes`` centered axes and ``num_buttons`` released buttons."""
        self._axes = [0.0] * num_axes
        self._buttons = [False] * num_buttons

    def scan(self) -> bool:
        """
        Look for the configured device in /dev/input and open it.

        Returns:
            True if device was found and opened, False otherwise.
        """
        log.info(labels.REMOTE_LOOKING_FOR_DEVICES.format(self.device_name))
        self.disconnect()

        for fn in os.listdir(DEVICE_PATH):
            if fn == self.device_name:
                return self._open_device(f'{DEVICE_PATH}/{fn}')

        return False

    def _open_device(self, device_path: str) -> bool:
        try:
            log.debug(labels.REMOTE_ATTEMPTING_OPEN.format(device_path))
            self.jsdev = open(device_path, 'rb')
            os.set_blocking(self.jsdev.fileno(), False)
            log.info(labels.REMOTE_OPEN_SUCCESS.format(device_path))
        except OSError as e:
            log.warning(labels.REMOTE_OPEN_WARNING.format(device_path, DEVICE_SEARCH_INTERVAL, e))
            return False

        try:
            self._initialize_device_layout()
            self.is_connected = True
            return True
        except OSError as e:
            log.error(labels.REMOTE_INIT_MAPPING_ERROR.format(e))
            self.disconnect()
            return False

    def _initialize_device_layout(self) -> None:
        """Query the device name and its number of axes and buttons."""
        buf = array.array('B', [0] * 64)
        ioctl(self.jsdev, JSIOCGNAME + (0x10000 * len(buf)), buf)  # type: ignore
        js_name = buf.tobytes().rstrip(b'\x00').decode('utf-8', errors='replace')
        log.info(labels.REMOTE_CONNECTED_TO.format(js_name))

        buf = array.array('B', [0])
        ioctl(self.jsdev, JSIOCGAXES, buf)  # type: ignore
        num_axes = buf[0]

        buf = array.array('B', [0])
        ioctl(self.jsdev, JSIOCGBUTTONS, buf)  # type: ignore
        num_buttons = buf[0]

        self.configure_layout(num_axes, num_buttons)
        log.info(labels.REMOTE_LAYOUT_FOUND.format(num_axes, num_buttons))

    def _normalize_axis(self, value: int) -> float:
        fvalue = -value / AXIS_NORMALIZATION_CONSTANT
        fvalue = max(-1.0, min(1.0, fvalue))
        if abs(fvalue) < self.deadzone:
            return 0.0
        return fvalue

    def poll_events(self) -> int:
        """
        Read every event currently buffered by the device and update the state.

        Returns:
            Number of events applied.

        Raises:
            OSError: the device went away; the caller is expected to disconnect and rescan
        """
        if not self.is_connected or self.jsdev is None:
            return 0

        applied = 0
        while True:
            evbuf = self.jsdev.read(JSDEV_READ_SIZE)
            # non-blocking read returns None when the buffer is drained
            if not evbuf or len(evbuf) < JSDEV_READ_SIZE:
                return applied

            self.apply_event(JsEvent.unpack(evbuf))
            applied += 1

    def apply_event(self, event: JsEvent) -> None:
        event_type = event.event_type & ~JS_EVENT_INIT

        if event_type & JS_EVENT_BUTTON:
            if event.number < len(self._buttons):
                self._buttons[event.number] = bool(event.value)

        elif event_type & JS_EVENT_AXIS:
            if event.number < len(self._axes):
                self._axes[event.number] = self._normalize_axis(event.value)

    def joy_frame(self) -> JoyFrame:
        """Snapshot of the current axes and buttons."""
        return JoyFrame(tuple(self._axes), tuple(self._buttons))

    def disconnect(self) -> None:
        """Close the device connection if open."""
        if self.jsdev:
            try:
                self.jsdev.close()
            except OSError as e:
                log.warning(labels.REMOTE_CLOSE_WARNING.format(e))
            finally:
                self.jsdev = None
        self.is_connected = False
