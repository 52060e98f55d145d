from ._message import MessageAbortCommand, MessagePayload, MessageTopic
from ._message_bus import MessageBus

__all__ = ["MessageBus", "MessageTopic", "MessageAbortCommand", "MessagePayload"]
