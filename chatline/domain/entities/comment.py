"""
Comment Entity - A remark attached to a message.

A comment lives only as long as its parent message. When the parent is
deleted, each comment is promoted into a message of the parent's
conversation (see `promote`).
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from chatline.domain.entities.message import Message
from chatline.domain.value_objects import (
    CommentId,
    ContentKind,
    ConversationId,
    MessageId,
    MessageStatus,
    UserId,
)


@dataclass
class Comment:
    id: CommentId
    message_id: MessageId
    author_id: UserId
    content: str
    content_kind: ContentKind
    created_at: datetime

    @classmethod
    def create(
        cls,
        message_id: MessageId,
        author_id: UserId,
        content: str,
        content_kind: ContentKind,
    ) -> Comment:
        return cls(
            id=CommentId(str(uuid4())),
            message_id=message_id,
            author_id=author_id,
            content=content,
            content_kind=content_kind,
            created_at=datetime.now(timezone.utc),
        )

    def promote(self, conversation_id: ConversationId, at: datetime) -> Message:
        """Turn this comment into a `comment-converted` message sent by its author."""
        return Message.create(
            conversation_id=conversation_id,
            sender_id=self.author_id,
            content=self.content,
            content_kind=self.content_kind,
            status=MessageStatus.COMMENT_CONVERTED,
            created_at=at,
        )


def promote_comments(
    comments: list[Comment], conversation_id: ConversationId
) -> list[Message]:
    """Promote comments in order; timestamps strictly increase by one microsecond."""
    ordered = sorted(comments, key=lambda c: c.created_at)
    base = datetime.now(timezone.utc)
    return [
        comment.promote(conversation_id, base + timedelta(microseconds=i))
        for i, comment in enumerate(ordered)
    ]
