"""
SendFirstMessage Command - Start a one-on-one conversation with a message.

Conversation creation, both memberships and the first message are separate
writes. A failure partway through is reported as is and nothing is undone.
"""

from dataclasses import dataclass

from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.application.common.lookups import find_user_by_name
from chatline.application.common.payload import Payload, resolve_payload
from chatline.domain.entities.conversation import Conversation
from chatline.domain.entities.message import Message
from chatline.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)
from chatline.domain.ports.media_storage import MediaStorage
from chatline.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    UserRepository,
)
from chatline.domain.value_objects import UserId


@dataclass
class FirstMessageResult:
    conversation: Conversation
    message: Message


@dataclass(frozen=True)
class SendFirstMessageCommand(Command[FirstMessageResult]):
    sender_id: UserId
    recipient_name: str
    payload: Payload


class SendFirstMessageHandler(CommandHandler[FirstMessageResult]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        media_storage: MediaStorage,
        ctx: RequestContext,
    ):
        self._conversation_repository = conversation_repository
        self._message_repository = message_repository
        self._user_repository = user_repository
        self._media_storage = media_storage
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: SendFirstMessageCommand) -> FirstMessageResult:
        recipient = await find_user_by_name(self._user_repository, command.recipient_name)
        if not recipient:
            raise EntityNotFoundError(f"User {command.recipient_name.strip()} not found")
        if recipient.id == command.sender_id:
            raise DomainValidationError("Cannot start a conversation with yourself")

        if await self._conversation_repository.find_between_users(
            command.sender_id, recipient.id
        ):
            raise ConflictError(
                "A private conversation already exists between these users"
            )

        content, kind = await resolve_payload(
            command.payload, self._media_storage, command.sender_id
        )

        conversation = Conversation.create_one_to_one()
        await self._conversation_repository.save(conversation)
        await self._conversation_repository.add_member(conversation.id, command.sender_id)
        await self._conversation_repository.add_member(conversation.id, recipient.id)

        message = Message.create(
            conversation_id=conversation.id,
            sender_id=command.sender_id,
            content=content,
            content_kind=kind,
        )
        await self._message_repository.save(message)
        self._logger.info(
            "Started conversation %s with %s", conversation.id, recipient.id
        )
        return FirstMessageResult(conversation=conversation, message=message)
