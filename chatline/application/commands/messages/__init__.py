"""Message commands."""

from .send_message import SendMessageCommand, SendMessageHandler, SentMessage
from .send_first_message import (
    FirstMessageResult,
    SendFirstMessageCommand,
    SendFirstMessageHandler,
)
from .delete_message import (
    DeleteMessageCommand,
    DeleteMessageHandler,
    DeleteMessageResult,
)
from .forward_message import ForwardMessageCommand, ForwardMessageHandler

__all__ = [
    "SendMessageCommand",
    "SendMessageHandler",
    "SentMessage",
    "SendFirstMessageCommand",
    "SendFirstMessageHandler",
    "FirstMessageResult",
    "DeleteMessageCommand",
    "DeleteMessageHandler",
    "DeleteMessageResult",
    "ForwardMessageCommand",
    "ForwardMessageHandler",
]
