"""
RenameUser Command - Change a user's display name.

The repository performs the rename and the one-on-one conversation name
cascade in a single transaction.
"""

from dataclasses import dataclass

from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.domain.entities.user import User
from chatline.domain.exceptions import ConflictError, EntityNotFoundError
from chatline.domain.ports.repositories import UserRepository
from chatline.domain.value_objects import UserId, UserName


@dataclass(frozen=True)
class RenameUserCommand(Command[User]):
    user_id: UserId
    new_name: UserName


class RenameUserHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository, ctx: RequestContext):
        self._user_repository = user_repository
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: RenameUserCommand) -> User:
        user = await self._user_repository.get_by_id(command.user_id)
        if not user:
            raise EntityNotFoundError(f"User {command.user_id} not found")

        if user.name == command.new_name:
            return user

        owner = await self._user_repository.get_by_name(command.new_name)
        if owner and owner.id != user.id:
            raise ConflictError("Username already taken")

        await self._user_repository.rename(user.id, command.new_name)
        self._logger.info(
            "Renamed user %s from %r to %r",
            user.id,
            user.name.value,
            command.new_name.value,
        )
        user.rename(command.new_name)
        return user
