"""
Prisma Conversation Repository Implementation.

Maps `conversations` and `convmembers` to Conversation entities and
membership checks. `created_at` is stored in the `lastconvo` column.
Deleting a conversation relies on the schema's ON DELETE CASCADE for
memberships, messages and their comments.
"""

from typing import Optional
from prisma import Prisma
from prisma.models import Conversation as PrismaConversation

from chatline.domain.entities.conversation import Conversation
from chatline.domain.entities.user import User
from chatline.domain.ports.repositories import (
    ConversationOverview,
    ConversationRepository,
)
from chatline.domain.value_objects import ConversationId, UserId, UserName
from chatline.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaConversation) -> Conversation:
        """Map Prisma record to domain entity."""
        return Conversation(
            id=ConversationId(record.id),
            is_group=record.is_group,
            name=record.name,
            photo=record.photo,
            created_at=record.created_at,
        )

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        record = await self._prisma.conversation.find_unique(
            where={"id": conversation_id.value}
        )
        return self._to_entity(record) if record else None

    async def save(self, conversation: Conversation) -> None:
        """Save (create or update) conversation."""
        await self._prisma.conversation.upsert(
            where={"id": conversation.id.value},
            data={
                "create": {
                    "id": conversation.id.value,
                    "is_group": conversation.is_group,
                    "name": conversation.name,
                    "photo": conversation.photo,
                    "created_at": conversation.created_at,
                },
                "update": {
                    "name": conversation.name,
                    "photo": conversation.photo,
                },
            },
        )

    async def delete(self, conversation_id: ConversationId) -> bool:
        """Delete conversation by ID. Returns True if deleted."""
        record = await self._prisma.conversation.delete(
            where={"id": conversation_id.value}
        )
        return record is not None

    async def add_member(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> None:
        await self._prisma.convmember.upsert(
            where={
                "conversation_id_user_id": {
                    "conversation_id": conversation_id.value,
                    "user_id": user_id.value,
                }
            },
            data={
                "create": {
                    "conversation_id": conversation_id.value,
                    "user_id": user_id.value,
                },
                "update": {},
            },
        )

    async def remove_member(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> bool:
        removed = await self._prisma.convmember.delete_many(
            where={"conversation_id": conversation_id.value, "user_id": user_id.value}
        )
        return removed > 0

    async def is_member(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> bool:
        count = await self._prisma.convmember.count(
            where={"conversation_id": conversation_id.value, "user_id": user_id.value}
        )
        return count > 0

    async def count_members(self, conversation_id: ConversationId) -> int:
        return await self._prisma.convmember.count(
            where={"conversation_id": conversation_id.value}
        )

    async def list_member_ids(self, conversation_id: ConversationId) -> list[UserId]:
        records = await self._prisma.convmember.find_many(
            where={"conversation_id": conversation_id.value},
            order={"id": "asc"},
        )
        return [UserId(record.user_id) for record in records]

    async def find_between_users(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[Conversation]:
        record = await self._prisma.conversation.find_first(
            where={
                "is_group": False,
                "AND": [
                    {"members": {"some": {"user_id": user_a.value}}},
                    {"members": {"some": {"user_id": user_b.value}}},
                ],
            }
        )
        return self._to_entity(record) if record else None

    async def find_group_by_name(self, name: str) -> Optional[Conversation]:
        record = await self._prisma.conversation.find_first(
            where={"is_group": True, "name": name}
        )
        return self._to_entity(record) if record else None

    async def list_for_user(self, user_id: UserId) -> list[ConversationOverview]:
        records = await self._prisma.conversation.find_many(
            where={"members": {"some": {"user_id": user_id.value}}},
            include={
                "members": {"include": {"user": True}},
                "messages": {"order_by": {"created_at": "desc"}, "take": 1},
            },
        )

        overviews = []
        for record in records:
            members = record.members or []
            counterpart = None
            if not record.is_group:
                other = next((m for m in members if m.user_id != user_id.value), None)
                if other and other.user:
                    counterpart = User(
                        id=UserId(other.user.id),
                        name=UserName(other.user.name),
                        photo=other.user.photo,
                    )
            last_message = (
                PrismaMessageRepository.to_entity(record.messages[0])
                if record.messages
                else None
            )
            overviews.append(
                ConversationOverview(
                    conversation=self._to_entity(record),
                    counterpart=counterpart,
                    last_message=last_message,
                    member_count=len(members),
                )
            )
        return overviews
