"""
AuthorizationGuard - Membership, ownership and group predicates.

Predicates answer False for absent rows, so "missing" and "not allowed" look
the same to callers. Handlers that must tell them apart look the resource up
first.
"""

from chatline.domain.exceptions import AccessDeniedError, InvalidOperationError
from chatline.domain.ports.repositories import (
    CommentRepository,
    ConversationRepository,
)
from chatline.domain.value_objects import CommentId, ConversationId, UserId


class AuthorizationGuard:
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        comment_repository: CommentRepository,
    ):
        self._conversation_repository = conversation_repository
        self._comment_repository = comment_repository

    async def is_member(self, user_id: UserId, conversation_id: ConversationId) -> bool:
        return await self._conversation_repository.is_member(conversation_id, user_id)

    async def is_comment_owner(self, user_id: UserId, comment_id: CommentId) -> bool:
        comment = await self._comment_repository.get_by_id(comment_id)
        return comment is not None and comment.author_id == user_id

    async def is_conversation_group(self, conversation_id: ConversationId) -> bool:
        conversation = await self._conversation_repository.get_by_id(conversation_id)
        return conversation is not None and conversation.is_group

    async def require_member(
        self,
        user_id: UserId,
        conversation_id: ConversationId,
        message: str = "You are not a member of this conversation",
    ) -> None:
        if not await self.is_member(user_id, conversation_id):
            raise AccessDeniedError(message)

    async def require_group(self, conversation_id: ConversationId) -> None:
        if not await self.is_conversation_group(conversation_id):
            raise InvalidOperationError("This conversation is not a group")
