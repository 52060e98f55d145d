"""Tests for axis mappings and axis resolution."""

from __future__ import annotations

import pytest

from joybase.configuration import ConfigurationError
from joybase.constants import ORIENTATION_AXES, POSITION_AXES
from joybase.runtime.joy_frame import JoyFrame
from joybase.runtime.teleop_controller.models import AxisMapping
from joybase.runtime.teleop_controller.services import resolve_axis


# ============================================================================
# resolve_axis Tests
# ============================================================================


class TestResolveAxis:
    """Tests for reading a semantic axis out of a frame."""

    def test_mapped_axis_returns_raw_value(self) -> None:
        """A mapped, in-range axis is returned unchanged."""
        frame = JoyFrame.of(axes=[0.5, -0.5, 1.0])
        mapping = AxisMapping({"x": 0, "y": 1})

        assert resolve_axis(frame, mapping, "x") == 0.5
        assert resolve_axis(frame, mapping, "y") == -0.5

    def test_unmapped_axis_is_zero(self) -> None:
        """An axis name absent from the mapping reads as 0.0."""
        frame = JoyFrame.of(axes=[0.5, -0.5, 1.0])

        assert resolve_axis(frame, AxisMapping({"x": 0}), "y") == 0.0

    @pytest.mark.parametrize("index", [3, 4, 100])
    def test_out_of_range_index_is_zero(self, index: int) -> None:
        """An index past the end of the frame's axes reads as 0.0."""
        frame = JoyFrame.of(axes=[0.5, -0.5, 1.0])

        assert resolve_axis(frame, AxisMapping({"x": index}), "x") == 0.0

    def test_empty_frame_is_zero(self) -> None:
        """A frame without axes never yields motion."""
        assert resolve_axis(JoyFrame(), AxisMapping({"x": 0}), "x") == 0.0

    def test_unknown_axis_name_is_zero(self) -> None:
        """Names outside the mapping vocabulary read as 0.0."""
        frame = JoyFrame.of(axes=[0.5])

        assert resolve_axis(frame, AxisMapping({"x": 0}), "w") == 0.0


# ============================================================================
# AxisMapping.from_config Tests
# ============================================================================


class TestAxisMappingFromConfig:
    """Tests for construction-time validation of axis maps."""

    def test_valid_position_map(self) -> None:
        """Known axes with non-negative indices are accepted."""
        mapping = AxisMapping.from_config("position", {"x": 1, "y": 0}, POSITION_AXES)

        assert mapping.index_of("x") == 1
        assert mapping.index_of("y") == 0

    def test_missing_map_is_empty(self) -> None:
        """An absent map leaves every axis unmapped."""
        mapping = AxisMapping.from_config("orientation", None, ORIENTATION_AXES)

        assert mapping.index_of("z") is None

    def test_unknown_axis_rejected(self) -> None:
        """A rotational axis in the position map is a configuration error."""
        with pytest.raises(ConfigurationError, match="unknown axis 'z'"):
            AxisMapping.from_config("position", {"x": 0, "z": 2}, POSITION_AXES)

    @pytest.mark.parametrize("index", [-1, 1.5, "2", True])
    def test_invalid_index_rejected(self, index) -> None:
        """Indices must be non-negative integers."""
        with pytest.raises(ConfigurationError):
            AxisMapping.from_config("position", {"x": index}, POSITION_AXES)

    def test_non_object_rejected(self) -> None:
        """The map must be a JSON object."""
        with pytest.raises(ConfigurationError):
            AxisMapping.from_config("position", [0, 1], POSITION_AXES)
