"""Tests for composing velocity commands."""

from __future__ import annotations

import pytest

from joybase.runtime.joy_frame import JoyFrame
from joybase.runtime.teleop_controller.models import AxisMapping, VelocityCommand
from joybase.runtime.teleop_controller.services import MotionMappings, compose

MAPPINGS = MotionMappings(position=AxisMapping({"x": 0, "y": 1}), orientation=AxisMapping({"z": 2}))
FRAME = JoyFrame.of(axes=[0.5, -0.5, 1.0])


class TestCompose:
    """Tests for the composition rules."""

    def test_motion_scaled_by_scale(self) -> None:
        """Axes are multiplied by the current scale (scenario A)."""
        command = compose(FRAME, MAPPINGS, 0.5, gate_open=True)

        assert command == VelocityCommand(0.25, -0.25, 0.5)

    def test_gate_closed_is_zero(self) -> None:
        """A closed gate yields the zero command whatever the axes (scenario B)."""
        command = compose(FRAME, MAPPINGS, 0.5, gate_open=False, previous=VelocityCommand(1.0, 1.0, 1.0))

        assert command == VelocityCommand.zero()
        assert command.is_zero()

    def test_scaling_frame_keeps_previous(self) -> None:
        """While the scale is being adjusted the previous command is repeated."""
        previous = VelocityCommand(0.1, 0.2, 0.3)

        assert compose(FRAME, MAPPINGS, 2.0, gate_open=True, scaling=True, previous=previous) is previous

    def test_missing_y_mapping_never_moves_sideways(self) -> None:
        """With no y mapping linear y stays 0.0 (scenario E)."""
        mappings = MotionMappings(position=AxisMapping({"x": 0}), orientation=AxisMapping({"z": 2}))

        for axes in ([0.5, -0.5, 1.0], [1.0, 1.0, 1.0], [-1.0, -1.0, -1.0, -1.0]):
            command = compose(JoyFrame.of(axes=axes), mappings, 1.0, gate_open=True)
            assert command.linear_y == 0.0

    def test_short_frame_zeroes_missing_axes(self) -> None:
        """Axes mapped past the end of the frame contribute nothing."""
        command = compose(JoyFrame.of(axes=[0.4]), MAPPINGS, 1.0, gate_open=True)

        assert command == VelocityCommand(0.4, 0.0, 0.0)


class TestVelocityCommand:
    """Tests for the command value type."""

    def test_twist_leaves_unused_components_zero(self) -> None:
        """Only linear x/y and angular z are ever non-zero."""
        twist = VelocityCommand(0.1, 0.2, 0.3).as_twist()

        assert twist == {
            "linear": {"x": 0.1, "y": 0.2, "z": 0.0},
            "angular": {"x": 0.0, "y": 0.0, "z": 0.3},
        }
