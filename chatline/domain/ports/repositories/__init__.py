from chatline.domain.ports.repositories.user_repository import UserRepository
from chatline.domain.ports.repositories.conversation_repository import (
    ConversationOverview,
    ConversationRepository,
)
from chatline.domain.ports.repositories.message_repository import MessageRepository
from chatline.domain.ports.repositories.comment_repository import CommentRepository

__all__ = [
    "UserRepository",
    "ConversationRepository",
    "ConversationOverview",
    "MessageRepository",
    "CommentRepository",
]
