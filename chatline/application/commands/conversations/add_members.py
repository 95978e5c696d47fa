"""
AddMembers Command - Add users to an existing group by name.
"""

from dataclasses import dataclass, field

from chatline.application.common.authorization import AuthorizationGuard
from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.application.common.lookups import find_user_by_name
from chatline.domain.entities.user import User
from chatline.domain.exceptions import EntityNotFoundError
from chatline.domain.ports.repositories import ConversationRepository, UserRepository
from chatline.domain.value_objects import ConversationId, UserId


@dataclass(frozen=True)
class AddMembersCommand(Command[list[User]]):
    conversation_id: ConversationId
    requester_id: UserId
    usernames: list[str] = field(default_factory=list)


class AddMembersHandler(CommandHandler[list[User]]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        user_repository: UserRepository,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ):
        self._conversation_repository = conversation_repository
        self._user_repository = user_repository
        self._guard = guard
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: AddMembersCommand) -> list[User]:
        """Returns the users actually added; existing members are skipped."""
        await self._guard.require_member(
            command.requester_id,
            command.conversation_id,
            "You are not a member of this group",
        )
        await self._guard.require_group(command.conversation_id)

        users: list[User] = []
        for raw_name in command.usernames:
            if not raw_name or not raw_name.strip():
                continue
            user = await find_user_by_name(self._user_repository, raw_name)
            if not user:
                raise EntityNotFoundError(f"User {raw_name.strip()} not found")
            users.append(user)

        added: list[User] = []
        for user in users:
            if any(user.id == other.id for other in added):
                continue
            if await self._conversation_repository.is_member(
                command.conversation_id, user.id
            ):
                continue
            await self._conversation_repository.add_member(
                command.conversation_id, user.id
            )
            added.append(user)

        self._logger.info(
            "Added %d member(s) to group %s", len(added), command.conversation_id
        )
        return added
