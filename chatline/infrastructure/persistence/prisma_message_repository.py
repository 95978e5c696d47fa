"""
Prisma Message Repository Implementation.

Column mapping (see prisma/schema.prisma):
- created_at  → messages.datetime
- sender_id   → messages.sender
- reply_to_id → messages.reply_to
"""

import logging
from typing import Optional
from prisma import Prisma
from prisma.models import Message as PrismaMessage

from chatline.domain.entities.comment import promote_comments
from chatline.domain.entities.message import Message
from chatline.domain.ports.repositories import MessageRepository
from chatline.domain.value_objects import (
    ContentKind,
    ConversationId,
    MessageId,
    MessageStatus,
    UserId,
)
from chatline.infrastructure.persistence.prisma_comment_repository import (
    PrismaCommentRepository,
)

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    @staticmethod
    def to_entity(record: PrismaMessage) -> Message:
        """Map Prisma record to domain entity."""
        return Message(
            id=MessageId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            sender_id=UserId(record.sender_id),
            content=record.content,
            content_kind=ContentKind(record.content_type),
            status=MessageStatus(record.status),
            created_at=record.created_at,
            reply_to=MessageId(record.reply_to_id) if record.reply_to_id else None,
        )

    @staticmethod
    def _create_data(message: Message) -> dict:
        return {
            "id": message.id.value,
            "conversation_id": message.conversation_id.value,
            "sender_id": message.sender_id.value,
            "content": message.content,
            "content_type": message.content_kind.value,
            "status": message.status.value,
            "created_at": message.created_at,
            "reply_to_id": message.reply_to.value if message.reply_to else None,
        }

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        record = await self._prisma.message.find_unique(where={"id": message_id.value})
        return self.to_entity(record) if record else None

    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """Messages of a conversation in chronological order (oldest first)."""
        records = await self._prisma.message.find_many(
            where={"conversation_id": conversation_id.value},
            order={"created_at": "asc"},
        )
        return [self.to_entity(record) for record in records]

    async def save(self, message: Message) -> None:
        """Insert a message; sent messages are never edited."""
        await self._prisma.message.upsert(
            where={"id": message.id.value},
            data={
                "create": self._create_data(message),
                "update": {},
            },
        )

    async def delete_promoting_comments(self, message: Message) -> list[Message]:
        async with self._prisma.tx() as transaction:
            records = await transaction.messagecomment.find_many(
                where={"message_id": message.id.value},
                order={"created_at": "asc"},
            )
            comments = [PrismaCommentRepository.to_entity(record) for record in records]
            promoted = promote_comments(comments, message.conversation_id)
            for converted in promoted:
                await transaction.message.create(data=self._create_data(converted))
            await transaction.messagecomment.delete_many(
                where={"id": {"in": [comment.id.value for comment in comments]}}
            )
            await transaction.message.update_many(
                where={"reply_to_id": message.id.value},
                data={"reply_to_id": None},
            )
            await transaction.message.delete(where={"id": message.id.value})
        logger.debug(
            "Message %s deleted with %d promoted comment(s)", message.id, len(promoted)
        )
        return promoted
