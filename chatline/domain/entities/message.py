"""
Message Entity - A single message in a conversation.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from chatline.domain.value_objects import (
    ContentKind,
    ConversationId,
    MessageId,
    MessageStatus,
    UserId,
)


@dataclass
class Message:
    id: MessageId
    conversation_id: ConversationId
    sender_id: UserId
    content: str
    content_kind: ContentKind
    status: MessageStatus
    created_at: datetime
    reply_to: Optional[MessageId] = None

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        sender_id: UserId,
        content: str,
        content_kind: ContentKind,
        status: MessageStatus = MessageStatus.SENT,
        reply_to: Optional[MessageId] = None,
        created_at: Optional[datetime] = None,
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        return cls(
            id=MessageId(str(uuid4())),
            conversation_id=conversation_id,
            sender_id=sender_id,
            content=content,
            content_kind=content_kind,
            status=status,
            created_at=created_at or datetime.now(timezone.utc),
            reply_to=reply_to,
        )

    def forward_to(self, target: ConversationId, sender_id: UserId) -> Message:
        """Copy of this message in another conversation, sent by the forwarder."""
        return Message.create(
            conversation_id=target,
            sender_id=sender_id,
            content=self.content,
            content_kind=self.content_kind,
            status=MessageStatus.FORWARDED,
        )
