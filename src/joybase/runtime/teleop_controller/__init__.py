"""Joystick frame to velocity command control law."""
