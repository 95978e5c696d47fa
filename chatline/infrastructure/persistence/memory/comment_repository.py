"""In-memory CommentRepository."""

from typing import Optional

from chatline.domain.entities.comment import Comment
from chatline.domain.ports.repositories import CommentRepository
from chatline.domain.value_objects import CommentId, MessageId
from chatline.infrastructure.persistence.memory.store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        comment = self._store.tables.comments.get(comment_id.value)
        return self._store.copy(comment) if comment else None

    async def get_by_message(self, message_id: MessageId) -> list[Comment]:
        comments = [
            c for c in self._store.tables.comments.values() if c.message_id == message_id
        ]
        comments.sort(key=lambda c: c.created_at)
        return [self._store.copy(c) for c in comments]

    async def save(self, comment: Comment) -> None:
        self._store.tables.comments[comment.id.value] = self._store.copy(comment)

    async def delete(self, comment_id: CommentId) -> bool:
        return self._store.tables.comments.pop(comment_id.value, None) is not None
