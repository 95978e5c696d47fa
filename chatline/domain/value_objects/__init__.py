"""
VALUE OBJECTS - Immutable domain types

Identifiers validate their UUID form on creation, names are trimmed and
bounded, and the closed enums reject unknown variants at the boundary.
"""

from chatline.domain.value_objects.user_id import UserId
from chatline.domain.value_objects.user_name import UserName, MAX_USERNAME_LENGTH
from chatline.domain.value_objects.conversation_id import ConversationId
from chatline.domain.value_objects.message_id import MessageId
from chatline.domain.value_objects.comment_id import CommentId
from chatline.domain.value_objects.content_kind import ContentKind
from chatline.domain.value_objects.message_status import MessageStatus

__all__ = [
    "UserId",
    "UserName",
    "MAX_USERNAME_LENGTH",
    "ConversationId",
    "MessageId",
    "CommentId",
    "ContentKind",
    "MessageStatus",
]
