"""
Conversation Repository Port - Interface for conversations and memberships.
Implementations: chatline/infrastructure/persistence/{prisma,memory}_conversation_repository.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from chatline.domain.entities.conversation import Conversation
from chatline.domain.entities.message import Message
from chatline.domain.entities.user import User
from chatline.domain.value_objects import ConversationId, UserId


@dataclass(frozen=True)
class ConversationOverview:
    """Raw per-conversation data behind a user's conversation list."""

    conversation: Conversation
    counterpart: Optional[User]
    last_message: Optional[Message]
    member_count: int


class ConversationRepository(ABC):
    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def save(self, conversation: Conversation) -> None: ...

    @abstractmethod
    async def delete(self, conversation_id: ConversationId) -> bool:
        """Delete a conversation with its memberships, messages and comments."""

    @abstractmethod
    async def add_member(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> None: ...

    @abstractmethod
    async def remove_member(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> bool: ...

    @abstractmethod
    async def is_member(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> bool: ...

    @abstractmethod
    async def count_members(self, conversation_id: ConversationId) -> int: ...

    @abstractmethod
    async def list_member_ids(
        self, conversation_id: ConversationId
    ) -> list[UserId]: ...

    @abstractmethod
    async def find_between_users(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[Conversation]:
        """The non-group conversation joining both users, if any."""

    @abstractmethod
    async def find_group_by_name(self, name: str) -> Optional[Conversation]: ...

    @abstractmethod
    async def list_for_user(self, user_id: UserId) -> list[ConversationOverview]: ...
