##########################################################
# Linux Joystick API event layout
#
# Source: linux/joystick.h
# struct js_event { __u32 time; __s16 value; __u8 type; __u8 number; }
##########################################################

from dataclasses import dataclass
import struct

JS_EVENT_FORMAT = "IhBB"

# ────────────────────────────────────────────────
# Event Type Bitmask Flags
# ────────────────────────────────────────────────
JS_EVENT_BUTTON = 0x01   # Button pressed/released
JS_EVENT_AXIS   = 0x02   # Axis motion
JS_EVENT_INIT   = 0x80   # Initial state of device (synthetic event)


@dataclass
class JsEvent:
    """Represents a single event from a Linux joystick device."""

    time: int  # Event timestamp (ms)
    value: int  # Value (-32767–32767 for axes, 0/1 for buttons)
    event_type: int  # Event type bitmask (JS_EVENT_AXIS, JS_EVENT_BUTTON, etc.)
    number: int  # Axis or button index

    @classmethod
    def unpack(cls, buffer: bytes) -> 'JsEvent':
        return cls(*struct.unpack(JS_EVENT_FORMAT, buffer))

    def pack(self) -> bytes:
        return struct.pack(JS_EVENT_FORMAT, self.time, self.value, self.event_type, self.number)
