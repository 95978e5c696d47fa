"""
MessageStatus - How a message came to exist in its conversation.
"""

from enum import Enum


class MessageStatus(str, Enum):
    SENT = "sent"
    FORWARDED = "forwarded"
    COMMENT_CONVERTED = "comment-converted"
