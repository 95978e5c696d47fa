"""
AddComment Command - Attach a comment to a message.

If the message was deleted in the meantime the comment is not lost: it is
appended to the conversation as an ordinary `sent` message instead.
"""

from dataclasses import dataclass
from typing import Optional

from chatline.application.common.authorization import AuthorizationGuard
from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.application.common.payload import Payload, resolve_payload
from chatline.domain.entities.comment import Comment
from chatline.domain.entities.message import Message
from chatline.domain.exceptions import EntityNotFoundError
from chatline.domain.ports.media_storage import MediaStorage
from chatline.domain.ports.repositories import CommentRepository, MessageRepository
from chatline.domain.value_objects import ConversationId, MessageId, UserId


@dataclass
class AddCommentResult:
    comment: Optional[Comment] = None
    # Set instead of `comment` when the parent message no longer exists
    message: Optional[Message] = None

    @property
    def converted(self) -> bool:
        return self.message is not None


@dataclass(frozen=True)
class AddCommentCommand(Command[AddCommentResult]):
    conversation_id: ConversationId
    message_id: MessageId
    author_id: UserId
    payload: Payload


class AddCommentHandler(CommandHandler[AddCommentResult]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        message_repository: MessageRepository,
        media_storage: MediaStorage,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ):
        self._comment_repository = comment_repository
        self._message_repository = message_repository
        self._media_storage = media_storage
        self._guard = guard
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: AddCommentCommand) -> AddCommentResult:
        await self._guard.require_member(command.author_id, command.conversation_id)

        parent = await self._message_repository.get_by_id(command.message_id)
        if parent and parent.conversation_id != command.conversation_id:
            raise EntityNotFoundError("Message not found in this conversation")

        content, kind = await resolve_payload(
            command.payload, self._media_storage, command.author_id
        )

        if not parent:
            message = Message.create(
                conversation_id=command.conversation_id,
                sender_id=command.author_id,
                content=content,
                content_kind=kind,
            )
            await self._message_repository.save(message)
            self._logger.info(
                "Message %s is gone, comment stored as message %s",
                command.message_id,
                message.id,
            )
            return AddCommentResult(message=message)

        comment = Comment.create(
            message_id=parent.id,
            author_id=command.author_id,
            content=content,
            content_kind=kind,
        )
        await self._comment_repository.save(comment)
        self._logger.info("Comment %s added to message %s", comment.id, parent.id)
        return AddCommentResult(comment=comment)
