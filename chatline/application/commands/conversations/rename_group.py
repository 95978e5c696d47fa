"""
RenameGroup Command - Change a group's name.
"""

from dataclasses import dataclass

from chatline.application.common.authorization import AuthorizationGuard
from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.domain.entities.conversation import Conversation
from chatline.domain.exceptions import ConflictError, EntityNotFoundError
from chatline.domain.ports.repositories import ConversationRepository
from chatline.domain.value_objects import ConversationId, UserId


@dataclass(frozen=True)
class RenameGroupCommand(Command[Conversation]):
    conversation_id: ConversationId
    requester_id: UserId
    new_name: str


class RenameGroupHandler(CommandHandler[Conversation]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ):
        self._conversation_repository = conversation_repository
        self._guard = guard
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: RenameGroupCommand) -> Conversation:
        await self._guard.require_group(command.conversation_id)
        await self._guard.require_member(
            command.requester_id,
            command.conversation_id,
            "You are not a member of this group",
        )

        conversation = await self._conversation_repository.get_by_id(
            command.conversation_id
        )
        if not conversation:
            raise EntityNotFoundError("Conversation not found")

        new_name = (command.new_name or "").strip()
        if new_name == conversation.name:
            return conversation

        taken = await self._conversation_repository.find_group_by_name(new_name)
        if taken and taken.id != conversation.id:
            raise ConflictError(f"A group named {new_name!r} already exists")

        conversation.rename(new_name)
        await self._conversation_repository.save(conversation)
        self._logger.info("Renamed group %s to %r", conversation.id, new_name)
        return conversation
