"""
LoginOrCreate Command - Log in by display name, registering on first use.

The returned user id doubles as the bearer token for every later request.
"""

from dataclasses import dataclass

from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.domain.entities.user import User
from chatline.domain.ports.repositories import UserRepository
from chatline.domain.value_objects import UserName


@dataclass
class LoginResult:
    user: User
    created: bool


@dataclass(frozen=True)
class LoginOrCreateCommand(Command[LoginResult]):
    name: UserName


class LoginOrCreateHandler(CommandHandler[LoginResult]):
    def __init__(self, user_repository: UserRepository, ctx: RequestContext):
        self._user_repository = user_repository
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: LoginOrCreateCommand) -> LoginResult:
        existing = await self._user_repository.get_by_name(command.name)
        if existing:
            self._logger.info("User %s logged in", existing.id)
            return LoginResult(user=existing, created=False)

        user = User.create(command.name)
        await self._user_repository.save(user)
        self._logger.info("Created user %s for name %r", user.id, user.name.value)
        return LoginResult(user=user, created=True)
