"""
ForwardMessage Command - Copy a message into another conversation.

The target is either a conversation id or, with the name marker, a name
looked up first among groups and then among users. Forwarding to a user
reuses the one-on-one conversation with them, creating it only when none
exists yet.
"""

from dataclasses import dataclass
from typing import Optional

from chatline.application.common.authorization import AuthorizationGuard
from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.application.common.lookups import find_user_by_name
from chatline.config.settings import Config
from chatline.domain.entities.conversation import Conversation
from chatline.domain.entities.message import Message
from chatline.domain.exceptions import DomainValidationError, EntityNotFoundError
from chatline.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    UserRepository,
)
from chatline.domain.value_objects import ConversationId, MessageId, UserId


@dataclass(frozen=True)
class ForwardMessageCommand(Command[Message]):
    source_conversation_id: ConversationId
    message_id: MessageId
    requester_id: UserId
    target: str
    target_name: Optional[str] = None


class ForwardMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ):
        self._conversation_repository = conversation_repository
        self._message_repository = message_repository
        self._user_repository = user_repository
        self._guard = guard
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: ForwardMessageCommand) -> Message:
        await self._guard.require_member(
            command.requester_id,
            command.source_conversation_id,
            "User is not part of the source conversation",
        )
        original = await self._message_repository.get_by_id(command.message_id)
        if not original or original.conversation_id != command.source_conversation_id:
            raise EntityNotFoundError("Message not found")

        if command.target == Config.FORWARD_BY_NAME_MARKER:
            target_id = await self._resolve_by_name(command)
        else:
            target_id = ConversationId(command.target)
            if not await self._conversation_repository.get_by_id(target_id):
                raise EntityNotFoundError("Target conversation not found")

        await self._guard.require_member(
            command.requester_id,
            target_id,
            "User is not part of the target conversation",
        )

        forwarded = original.forward_to(target_id, command.requester_id)
        await self._message_repository.save(forwarded)
        self._logger.info(
            "Forwarded message %s to conversation %s as %s",
            original.id,
            target_id,
            forwarded.id,
        )
        return forwarded

    async def _resolve_by_name(self, command: ForwardMessageCommand) -> ConversationId:
        name = (command.target_name or "").strip()
        if not name:
            raise DomainValidationError("Target username required")

        group = await self._conversation_repository.find_group_by_name(name)
        if group:
            return group.id

        target_user = await find_user_by_name(self._user_repository, name)
        if not target_user:
            raise EntityNotFoundError("Target user not found")
        if target_user.id == command.requester_id:
            raise DomainValidationError("Cannot forward a message to yourself")

        conversation = await self._conversation_repository.find_between_users(
            command.requester_id, target_user.id
        )
        if conversation:
            return conversation.id

        self._logger.info(
            "No one-on-one conversation with %s yet, creating one", target_user.id
        )
        conversation = Conversation.create_one_to_one()
        await self._conversation_repository.save(conversation)
        await self._conversation_repository.add_member(conversation.id, command.requester_id)
        await self._conversation_repository.add_member(conversation.id, target_user.id)
        return conversation.id
