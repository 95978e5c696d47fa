"""
RemoveComment Command - Delete one of your own comments.

A missing comment and someone else's comment are both Forbidden.
"""

from dataclasses import dataclass
from typing import Optional

from chatline.application.common.authorization import AuthorizationGuard
from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.domain.exceptions import AccessDeniedError
from chatline.domain.ports.repositories import CommentRepository
from chatline.domain.value_objects import CommentId, ConversationId, UserId


@dataclass(frozen=True)
class RemoveCommentCommand(Command[None]):
    comment_id: CommentId
    requester_id: UserId
    conversation_id: Optional[ConversationId] = None


class RemoveCommentHandler(CommandHandler[None]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ):
        self._comment_repository = comment_repository
        self._guard = guard
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: RemoveCommentCommand) -> None:
        if command.conversation_id is not None:
            await self._guard.require_member(
                command.requester_id, command.conversation_id
            )
        if not await self._guard.is_comment_owner(
            command.requester_id, command.comment_id
        ):
            raise AccessDeniedError("You can only remove your own comments")

        await self._comment_repository.delete(command.comment_id)
        self._logger.info("Comment %s removed", command.comment_id)
