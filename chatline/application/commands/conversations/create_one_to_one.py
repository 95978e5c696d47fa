"""
CreateOneToOne Command - Open a private conversation between two users.
"""

from dataclasses import dataclass

from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.domain.entities.conversation import Conversation
from chatline.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)
from chatline.domain.ports.repositories import ConversationRepository, UserRepository
from chatline.domain.value_objects import UserId


@dataclass(frozen=True)
class CreateOneToOneCommand(Command[Conversation]):
    user_a: UserId
    user_b: UserId


class CreateOneToOneHandler(CommandHandler[Conversation]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        user_repository: UserRepository,
        ctx: RequestContext,
    ):
        self._conversation_repository = conversation_repository
        self._user_repository = user_repository
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: CreateOneToOneCommand) -> Conversation:
        if command.user_a == command.user_b:
            raise DomainValidationError("Cannot start a conversation with yourself")

        for user_id in (command.user_a, command.user_b):
            if not await self._user_repository.get_by_id(user_id):
                raise EntityNotFoundError(f"User {user_id} not found")

        existing = await self._conversation_repository.find_between_users(
            command.user_a, command.user_b
        )
        if existing:
            raise ConflictError(
                "A private conversation already exists between these users"
            )

        conversation = Conversation.create_one_to_one()
        await self._conversation_repository.save(conversation)
        await self._conversation_repository.add_member(conversation.id, command.user_a)
        await self._conversation_repository.add_member(conversation.id, command.user_b)
        self._logger.info(
            "Created conversation %s between %s and %s",
            conversation.id,
            command.user_a,
            command.user_b,
        )
        return conversation
