"""Shared fixtures for the joybase tests."""

from __future__ import annotations

import queue
from typing import Dict, Optional

import pytest

from joybase.configuration import TeleopParameters
from joybase.runtime.messaging import MessageTopic
from joybase.runtime.teleop_controller.models import AxisMapping, ButtonMapping, ScaleState

ENABLE = 0
INCREMENT = 1
DECREMENT = 2


@pytest.fixture
def buttons() -> ButtonMapping:
    return ButtonMapping(enable_move=ENABLE, increment_speed=INCREMENT, decrement_speed=DECREMENT)


@pytest.fixture
def teleop_parameters(buttons: ButtonMapping) -> TeleopParameters:
    return TeleopParameters(
        buttons=buttons,
        position_map=AxisMapping({"x": 0, "y": 1}),
        orientation_map=AxisMapping({"z": 2}),
        scale=ScaleState(current_scale=0.5, max_scale=2.0, min_scale=0.1, cooldown=0.5),
    )


class FakeMessageBus:
    """In-process stand-in for MessageBus, one queue.Queue per topic."""

    def __init__(self) -> None:
        self.queues: Dict[MessageTopic, queue.Queue] = {topic: queue.Queue() for topic in MessageTopic}

    def put(self, topic: MessageTopic, payload) -> None:
        self.queues[topic].put(payload)

    def publish_latest(self, topic: MessageTopic, payload) -> None:
        self.queues[topic].put(payload)

    def get(self, topic: MessageTopic, *, block: bool = True, timeout: Optional[float] = None):
        return self.queues[topic].get(block=block, timeout=timeout)

    def drain(self, topic: MessageTopic) -> list:
        items = []
        while not self.queues[topic].empty():
            items.append(self.queues[topic].get_nowait())
        return items


@pytest.fixture
def message_bus() -> FakeMessageBus:
    return FakeMessageBus()
