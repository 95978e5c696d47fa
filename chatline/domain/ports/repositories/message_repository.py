"""
Message Repository Port - Interface for message persistence.
Implementations: chatline/infrastructure/persistence/{prisma,memory}_message_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatline.domain.entities.message import Message
from chatline.domain.value_objects import ConversationId, MessageId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """All messages of a conversation, oldest first."""

    @abstractmethod
    async def save(self, message: Message) -> None: ...

    @abstractmethod
    async def delete_promoting_comments(self, message: Message) -> list[Message]:
        """
        In one transaction: read the message's comments, insert them as
        `comment-converted` messages (see `promote_comments`), purge exactly
        those comments, clear `reply_to` on replies to the message, and
        delete it. Returns the promoted messages.
        """
