"""In-memory MessageRepository."""

from typing import Optional

from chatline.domain.entities.comment import promote_comments
from chatline.domain.entities.message import Message
from chatline.domain.ports.repositories import MessageRepository
from chatline.domain.value_objects import ConversationId, MessageId
from chatline.infrastructure.persistence.memory.store import InMemoryStore, Tables


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        message = self._store.tables.messages.get(message_id.value)
        return self._store.copy(message) if message else None

    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        messages = [
            m
            for m in self._store.tables.messages.values()
            if m.conversation_id == conversation_id
        ]
        messages.sort(key=lambda m: m.created_at)
        return [self._store.copy(m) for m in messages]

    async def save(self, message: Message) -> None:
        self._store.tables.messages[message.id.value] = self._store.copy(message)

    async def delete_promoting_comments(self, message: Message) -> list[Message]:
        with self._store.transaction() as tables:
            comments = [
                c for c in tables.comments.values() if c.message_id == message.id
            ]
            promoted = promote_comments(comments, message.conversation_id)

            for comment in comments:
                del tables.comments[comment.id.value]
            for converted in promoted:
                tables.messages[converted.id.value] = self._store.copy(converted)

            self._clear_replies(tables, message.id)
            tables.messages.pop(message.id.value, None)
        return promoted

    def _clear_replies(self, tables: Tables, message_id: MessageId) -> None:
        for message in tables.messages.values():
            if message.reply_to == message_id:
                message.reply_to = None
