"""
LeaveGroup Command - Remove the requester from a group.

The last member leaving deletes the group with its messages and comments.
"""

from dataclasses import dataclass

from chatline.application.common.authorization import AuthorizationGuard
from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.domain.ports.repositories import ConversationRepository
from chatline.domain.value_objects import ConversationId, UserId


@dataclass
class LeaveGroupResult:
    remaining_members: int
    group_deleted: bool


@dataclass(frozen=True)
class LeaveGroupCommand(Command[LeaveGroupResult]):
    conversation_id: ConversationId
    user_id: UserId


class LeaveGroupHandler(CommandHandler[LeaveGroupResult]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ):
        self._conversation_repository = conversation_repository
        self._guard = guard
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: LeaveGroupCommand) -> LeaveGroupResult:
        await self._guard.require_group(command.conversation_id)
        await self._guard.require_member(
            command.user_id,
            command.conversation_id,
            "You are not a member of this group",
        )

        await self._conversation_repository.remove_member(
            command.conversation_id, command.user_id
        )
        remaining = await self._conversation_repository.count_members(
            command.conversation_id
        )
        if remaining == 0:
            await self._conversation_repository.delete(command.conversation_id)
            self._logger.info(
                "Group %s deleted after its last member left", command.conversation_id
            )
            return LeaveGroupResult(remaining_members=0, group_deleted=True)

        self._logger.info(
            "User %s left group %s", command.user_id, command.conversation_id
        )
        return LeaveGroupResult(remaining_members=remaining, group_deleted=False)
