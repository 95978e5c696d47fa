"""
DeleteMessage Command - Remove a message, promoting its comments first.

Promotion and deletion are one repository transaction: either every comment
becomes a `comment-converted` message and the parent is gone, or nothing
changed. Sender ownership is only enforced when
Config.ENFORCE_MESSAGE_OWNERSHIP is on.
"""

from dataclasses import dataclass

from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.config.settings import Config
from chatline.domain.exceptions import AccessDeniedError, EntityNotFoundError
from chatline.domain.ports.repositories import MessageRepository
from chatline.domain.value_objects import ConversationId, MessageId, UserId


@dataclass
class DeleteMessageResult:
    promoted_comments: int


@dataclass(frozen=True)
class DeleteMessageCommand(Command[DeleteMessageResult]):
    conversation_id: ConversationId
    message_id: MessageId
    requester_id: UserId


class DeleteMessageHandler(CommandHandler[DeleteMessageResult]):
    def __init__(
        self,
        message_repository: MessageRepository,
        ctx: RequestContext,
    ):
        self._message_repository = message_repository
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: DeleteMessageCommand) -> DeleteMessageResult:
        message = await self._message_repository.get_by_id(command.message_id)
        if not message or message.conversation_id != command.conversation_id:
            raise EntityNotFoundError("Message not found")

        if Config.ENFORCE_MESSAGE_OWNERSHIP and message.sender_id != command.requester_id:
            raise AccessDeniedError("Only the sender can delete this message")

        promoted = await self._message_repository.delete_promoting_comments(message)

        self._logger.info(
            "Deleted message %s, promoted %d comment(s)", message.id, len(promoted)
        )
        return DeleteMessageResult(promoted_comments=len(promoted))
