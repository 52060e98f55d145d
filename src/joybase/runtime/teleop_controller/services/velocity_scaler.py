"""
Runtime adjustment of the velocity scale from the increment / decrement buttons.

A held button would otherwise ramp the scale at the joystick poll rate, so
adjustments are rate limited by a cooldown. The cooldown is a timestamp
comparison: frames arriving inside the window are processed normally and the
adjustment request they carry is dropped.
"""

from dataclasses import replace

from joybase import labels
from joybase.constants import SCALE_STEP_FACTOR
from joybase.logger import Logger
from joybase.runtime.joy_frame import JoyFrame
from joybase.runtime.teleop_controller.models import ButtonMapping, ScaleState

log = Logger().setup_logger('Velocity scaler')


def increment_requested(frame: JoyFrame, buttons: ButtonMapping) -> bool:
    return frame.button(buttons.increment_speed)


def decrement_requested(frame: JoyFrame, buttons: ButtonMapping) -> bool:
    return frame.button(buttons.decrement_speed)


def scale_requested(frame: JoyFrame, buttons: ButtonMapping) -> bool:
    """True when the frame asks for a scale change; such frames carry no motion."""
    return increment_requested(frame, buttons) or decrement_requested(frame, buttons)


def adjust(frame: JoyFrame, buttons: ButtonMapping, state: ScaleState, now: float) -> ScaleState:
    """
    Scale state after applying the frame's adjustment request at time ``now``.

    Increment is checked first, so it wins when both buttons are held. The
    returned state is ``state`` itself when nothing is applied.
    """
    if increment_requested(frame, buttons):
        candidate = min(state.current_scale * SCALE_STEP_FACTOR, state.max_scale)
    elif decrement_requested(frame, buttons):
        candidate = max(state.current_scale / SCALE_STEP_FACTOR, state.min_scale)
    else:
        return state

    if not state.cooldown_elapsed(now):
        return state

    return replace(state, current_scale=candidate, last_adjustment_time=now)


class VelocityScaler:
    """
    Owns the ScaleState of a teleop session.

    Attributes:
        state: current scale and bounds, replaced on every applied adjustment
    """

    def __init__(self, state: ScaleState):
        state.validate()
        if not state.in_bounds():
            clamped = state.clamped()
            log.warning(
                labels.CONFIG_INITIAL_SCALE_CLAMPED.format(
                    state.current_scale, state.min_scale, state.max_scale, clamped.current_scale
                )
            )
            state = clamped
        self.state = state

    @property
    def scale(self) -> float:
        return self.state.current_scale

    def adjust(self, frame: JoyFrame, buttons: ButtonMapping, now: float) -> bool:
        """Apply the frame's adjustment request; returns True when the scale was updated."""
        previous = self.state
        updated = adjust(frame, buttons, previous, now)
        if updated is previous:
            return False

        self.state = updated
        if updated.current_scale == previous.current_scale:
            log.info(labels.TELEOP_SCALE_AT_BOUND.format(updated.current_scale))
        elif updated.current_scale > previous.current_scale:
            log.info(labels.TELEOP_SCALE_INCREASED.format(previous.current_scale, updated.current_scale))
        else:
            log.info(labels.TELEOP_SCALE_DECREASED.format(previous.current_scale, updated.current_scale))
        return True
