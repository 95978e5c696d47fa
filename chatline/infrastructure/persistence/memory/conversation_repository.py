"""In-memory ConversationRepository."""

from typing import Optional

from chatline.domain.entities.conversation import Conversation
from chatline.domain.ports.repositories import (
    ConversationOverview,
    ConversationRepository,
)
from chatline.domain.value_objects import ConversationId, UserId
from chatline.infrastructure.persistence.memory.store import InMemoryStore


class InMemoryConversationRepository(ConversationRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _member_ids(self, conversation_id: str) -> list[str]:
        return [u for c, u in self._store.tables.members if c == conversation_id]

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        conversation = self._store.tables.conversations.get(conversation_id.value)
        return self._store.copy(conversation) if conversation else None

    async def save(self, conversation: Conversation) -> None:
        self._store.tables.conversations[conversation.id.value] = self._store.copy(
            conversation
        )

    async def delete(self, conversation_id: ConversationId) -> bool:
        with self._store.transaction() as tables:
            if tables.conversations.pop(conversation_id.value, None) is None:
                return False
            tables.members[:] = [
                pair for pair in tables.members if pair[0] != conversation_id.value
            ]
            doomed = {
                m_id
                for m_id, message in tables.messages.items()
                if message.conversation_id == conversation_id
            }
            for m_id in doomed:
                del tables.messages[m_id]
            for c_id in [
                c_id
                for c_id, comment in tables.comments.items()
                if comment.message_id.value in doomed
            ]:
                del tables.comments[c_id]
            return True

    async def add_member(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> None:
        pair = (conversation_id.value, user_id.value)
        if pair not in self._store.tables.members:
            self._store.tables.members.append(pair)

    async def remove_member(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> bool:
        pair = (conversation_id.value, user_id.value)
        if pair not in self._store.tables.members:
            return False
        self._store.tables.members.remove(pair)
        return True

    async def is_member(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> bool:
        return (conversation_id.value, user_id.value) in self._store.tables.members

    async def count_members(self, conversation_id: ConversationId) -> int:
        return len(self._member_ids(conversation_id.value))

    async def list_member_ids(self, conversation_id: ConversationId) -> list[UserId]:
        return [UserId(u) for u in self._member_ids(conversation_id.value)]

    async def find_between_users(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[Conversation]:
        for conversation in self._store.tables.conversations.values():
            if conversation.is_group:
                continue
            members = set(self._member_ids(conversation.id.value))
            if {user_a.value, user_b.value} <= members:
                return self._store.copy(conversation)
        return None

    async def find_group_by_name(self, name: str) -> Optional[Conversation]:
        for conversation in self._store.tables.conversations.values():
            if conversation.is_group and conversation.name == name:
                return self._store.copy(conversation)
        return None

    async def list_for_user(self, user_id: UserId) -> list[ConversationOverview]:
        tables = self._store.tables
        overviews = []
        for c_id, u_id in tables.members:
            if u_id != user_id.value:
                continue
            conversation = tables.conversations.get(c_id)
            if conversation is None:
                continue
            member_ids = self._member_ids(c_id)

            counterpart = None
            if not conversation.is_group:
                other = next((m for m in member_ids if m != user_id.value), None)
                counterpart = tables.users.get(other) if other else None

            messages = [
                m for m in tables.messages.values() if m.conversation_id.value == c_id
            ]
            last_message = max(messages, key=lambda m: m.created_at) if messages else None

            overviews.append(
                ConversationOverview(
                    conversation=self._store.copy(conversation),
                    counterpart=self._store.copy(counterpart) if counterpart else None,
                    last_message=self._store.copy(last_message) if last_message else None,
                    member_count=len(member_ids),
                )
            )
        return overviews
