"""Deadman-gated joystick teleoperation for an omnidirectional mobile base."""

__version__ = '0.1.0'
