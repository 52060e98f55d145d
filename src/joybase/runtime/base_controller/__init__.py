"""Delivery of velocity commands to the base driver."""

from .base_controller import BaseController
from .command_writer import CommandWriter

__all__ = [
    'BaseController',
    'CommandWriter',
]
