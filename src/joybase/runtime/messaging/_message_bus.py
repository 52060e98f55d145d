import multiprocessing
import queue
from typing import Dict, Literal, Optional, overload

from joybase.constants import ABORT_QUEUE_SIZE, CMD_VEL_QUEUE_SIZE, JOY_QUEUE_SIZE
from joybase.runtime.joy_frame import JoyFrame
from joybase.runtime.messaging._message import MessageAbortCommand, MessagePayload, MessageTopic
from joybase.runtime.teleop_controller.models import VelocityCommand
from joybase.singleton import Singleton


class MessageBus(metaclass=Singleton):
    """Queues shared by the remote controller and teleop processes."""

    def __init__(self) -> None:
        self._queues: Dict[MessageTopic, multiprocessing.Queue] = {
            MessageTopic.ABORT: multiprocessing.Queue(ABORT_QUEUE_SIZE),
            MessageTopic.JOY: multiprocessing.Queue(JOY_QUEUE_SIZE),
            MessageTopic.CMD_VEL: multiprocessing.Queue(CMD_VEL_QUEUE_SIZE),
        }

    def put(
        self,
        topic: MessageTopic,
        payload: MessagePayload,
        block: bool = True,
        timeout: Optional[float] = None,
    ) -> None:
        self._queues[topic].put(payload, block=block, timeout=timeout)

    def publish_latest(self, topic: MessageTopic, payload: MessagePayload) -> None:
        """
        Put without blocking, dropping the oldest pending message when the queue is full.

        Only valid for a topic with a single producer.
        """
        topic_queue = self._queues[topic]
        while True:
            try:
                topic_queue.put_nowait(payload)
                return
            except queue.Full:
                try:
                    topic_queue.get(timeout=0.01)
                except queue.Empty:
                    pass

    @overload
    def get(
        self,
        topic: Literal[MessageTopic.ABORT],
        *,
        block: bool = True,
        timeout: Optional[float] = None,
    ) -> MessageAbortCommand: ...
    @overload
    def get(
        self,
        topic: Literal[MessageTopic.JOY],
        *,
        block: bool = True,
        timeout: Optional[float] = None,
    ) -> JoyFrame: ...
    @overload
    def get(
        self,
        topic: Literal[MessageTopic.CMD_VEL],
        *,
        block: bool = True,
        timeout: Optional[float] = None,
    ) -> VelocityCommand: ...
    @overload
    def get(
        self,
        topic: MessageTopic,
        *,
        block: bool = True,
        timeout: Optional[float] = None,
    ) -> MessagePayload: ...

    def get(
        self,
        topic: MessageTopic,
        *,
        block: bool = True,
        timeout: Optional[float] = None,
    ) -> MessagePayload:
        """Get a message from the queue for the given topic."""
        return self._queues[topic].get(block=block, timeout=timeout)

    def close(self) -> None:
        """Close all queues and join their feeder threads."""
        for topic_queue in self._queues.values():
            topic_queue.close()
            topic_queue.join_thread()
