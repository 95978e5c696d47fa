"""GetUser Query - Public profile of a user."""

from dataclasses import dataclass

from chatline.application.common.interfaces import Query, QueryHandler
from chatline.domain.entities.user import User
from chatline.domain.exceptions import EntityNotFoundError
from chatline.domain.ports.repositories import UserRepository
from chatline.domain.value_objects import UserId


@dataclass(frozen=True)
class GetUserQuery(Query[User]):
    user_id: UserId


class GetUserHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetUserQuery) -> User:
        user = await self._user_repository.get_by_id(query.user_id)
        if not user:
            raise EntityNotFoundError(f"User {query.user_id} not found")
        return user
