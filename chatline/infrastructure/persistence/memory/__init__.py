from chatline.infrastructure.persistence.memory.store import InMemoryStore
from chatline.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
)
from chatline.infrastructure.persistence.memory.conversation_repository import (
    InMemoryConversationRepository,
)
from chatline.infrastructure.persistence.memory.message_repository import (
    InMemoryMessageRepository,
)
from chatline.infrastructure.persistence.memory.comment_repository import (
    InMemoryCommentRepository,
)

__all__ = [
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryConversationRepository",
    "InMemoryMessageRepository",
    "InMemoryCommentRepository",
]
