"""
SendMessage Command - Append a message to a conversation.

Text payloads accept `text` or `emoji`; uploads become `photo` or `gif`.
`reply_to` is best-effort: an unparsable id, or one that does not belong to
this conversation, is dropped with a warning instead of failing the send.
"""

from dataclasses import dataclass
from typing import Optional

from chatline.application.common.authorization import AuthorizationGuard
from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.application.common.payload import Payload, resolve_payload
from chatline.domain.entities.message import Message
from chatline.domain.entities.user import User
from chatline.domain.exceptions import DomainValidationError, EntityNotFoundError
from chatline.domain.ports.media_storage import MediaStorage
from chatline.domain.ports.repositories import MessageRepository, UserRepository
from chatline.domain.value_objects import ConversationId, MessageId, UserId


@dataclass
class SentMessage:
    message: Message
    sender: User


@dataclass(frozen=True)
class SendMessageCommand(Command[SentMessage]):
    conversation_id: ConversationId
    sender_id: UserId
    payload: Payload
    reply_to: Optional[str] = None


class SendMessageHandler(CommandHandler[SentMessage]):
    def __init__(
        self,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        media_storage: MediaStorage,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ):
        self._message_repository = message_repository
        self._user_repository = user_repository
        self._media_storage = media_storage
        self._guard = guard
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: SendMessageCommand) -> SentMessage:
        await self._guard.require_member(
            command.sender_id,
            command.conversation_id,
            "Sender is not part of the conversation",
        )

        sender = await self._user_repository.get_by_id(command.sender_id)
        if not sender:
            raise EntityNotFoundError("Sender not found")

        reply_to = await self._resolve_reply_to(command)
        content, kind = await resolve_payload(
            command.payload, self._media_storage, command.sender_id
        )

        message = Message.create(
            conversation_id=command.conversation_id,
            sender_id=command.sender_id,
            content=content,
            content_kind=kind,
            reply_to=reply_to,
        )
        await self._message_repository.save(message)
        self._logger.info(
            "Message %s (%s) sent to conversation %s",
            message.id,
            kind.value,
            command.conversation_id,
        )
        return SentMessage(message=message, sender=sender)

    async def _resolve_reply_to(
        self, command: SendMessageCommand
    ) -> Optional[MessageId]:
        raw = (command.reply_to or "").strip()
        if not raw:
            return None
        try:
            reply_to = MessageId(raw)
        except DomainValidationError:
            self._logger.warning("Ignoring invalid reply_to=%r", raw)
            return None

        target = await self._message_repository.get_by_id(reply_to)
        if not target or target.conversation_id != command.conversation_id:
            self._logger.warning(
                "Ignoring reply_to=%s: not a message of conversation %s",
                raw,
                command.conversation_id,
            )
            return None
        return reply_to
