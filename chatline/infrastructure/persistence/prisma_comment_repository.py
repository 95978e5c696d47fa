"""
Prisma Comment Repository Implementation.

`message_comments.timestamp` holds `created_at`, `user_id` the author.
"""

from typing import Optional
from prisma import Prisma
from prisma.models import MessageComment as PrismaComment

from chatline.domain.entities.comment import Comment
from chatline.domain.ports.repositories import CommentRepository
from chatline.domain.value_objects import CommentId, ContentKind, MessageId, UserId


class PrismaCommentRepository(CommentRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    @staticmethod
    def to_entity(record: PrismaComment) -> Comment:
        return Comment(
            id=CommentId(record.id),
            message_id=MessageId(record.message_id),
            author_id=UserId(record.user_id),
            content=record.content,
            content_kind=ContentKind(record.content_type),
            created_at=record.created_at,
        )

    async def get_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        record = await self._prisma.messagecomment.find_unique(
            where={"id": comment_id.value}
        )
        return self.to_entity(record) if record else None

    async def get_by_message(self, message_id: MessageId) -> list[Comment]:
        records = await self._prisma.messagecomment.find_many(
            where={"message_id": message_id.value},
            order={"created_at": "asc"},
        )
        return [self.to_entity(record) for record in records]

    async def save(self, comment: Comment) -> None:
        await self._prisma.messagecomment.create(
            data={
                "id": comment.id.value,
                "message_id": comment.message_id.value,
                "user_id": comment.author_id.value,
                "content": comment.content,
                "content_type": comment.content_kind.value,
                "created_at": comment.created_at,
            }
        )

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete comment by ID. Returns True if deleted."""
        record = await self._prisma.messagecomment.delete(
            where={"id": comment_id.value}
        )
        return record is not None
