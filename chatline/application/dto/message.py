"""Message and comment DTOs for API responses."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from chatline.domain.entities.comment import Comment
from chatline.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to frontend."""

    id: str
    conversation_id: str
    sender_id: str
    content: str
    content_type: str
    status: str
    created_at: datetime
    reply_to: Optional[str] = None
    sender_name: Optional[str] = None
    sender_photo: Optional[str] = None
    # Snapshot of the replied-to message, null when it no longer exists
    reply_content: Optional[str] = None
    reply_sender_name: Optional[str] = None

    @classmethod
    def from_entity(cls, message: Message, **extra) -> "MessageDTO":
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            sender_id=message.sender_id.value,
            content=message.content,
            content_type=message.content_kind.value,
            status=message.status.value,
            created_at=message.created_at,
            reply_to=message.reply_to.value if message.reply_to else None,
            **extra,
        )


class CommentDTO(BaseModel):
    id: str
    message_id: str
    author_id: str
    content: str
    content_type: str
    created_at: datetime
    author_name: Optional[str] = None

    @classmethod
    def from_entity(cls, comment: Comment, author_name: Optional[str] = None) -> "CommentDTO":
        return cls(
            id=comment.id.value,
            message_id=comment.message_id.value,
            author_id=comment.author_id.value,
            content=comment.content,
            content_type=comment.content_kind.value,
            created_at=comment.created_at,
            author_name=author_name,
        )
