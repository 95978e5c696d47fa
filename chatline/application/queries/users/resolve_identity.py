"""
ResolveIdentity Query - Turn a bearer token into the acting user.

Maps from: the Authorization header of every protected route.
"""

from dataclasses import dataclass
from typing import Optional

from chatline.application.common.interfaces import Query, QueryHandler
from chatline.domain.entities.user import User
from chatline.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    UnauthenticatedError,
)
from chatline.domain.ports.repositories import UserRepository
from chatline.domain.value_objects import UserId


@dataclass(frozen=True)
class ResolveIdentityQuery(Query[User]):
    token: Optional[str]


class ResolveIdentityHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: ResolveIdentityQuery) -> User:
        """
        Raises:
            UnauthenticatedError: token missing or not a UUID
            EntityNotFoundError: no user has this id
        """
        if not query.token:
            raise UnauthenticatedError()
        try:
            user_id = UserId(query.token.strip())
        except DomainValidationError:
            raise UnauthenticatedError("Unauthorized: malformed token")

        user = await self._user_repository.get_by_id(user_id)
        if not user:
            raise EntityNotFoundError("User not found")
        return user
