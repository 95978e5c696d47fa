"""
SearchUser Query - Find a user by exact name.

Also reports the one-on-one conversation the requester already has with
that user, so a client can open it instead of starting a new one.
"""

from dataclasses import dataclass
from typing import Optional

from chatline.application.common.interfaces import Query, QueryHandler
from chatline.application.common.lookups import find_user_by_name
from chatline.domain.entities.user import User
from chatline.domain.exceptions import EntityNotFoundError
from chatline.domain.ports.repositories import ConversationRepository, UserRepository
from chatline.domain.value_objects import ConversationId, UserId


@dataclass
class SearchUserResult:
    user: User
    conversation_id: Optional[ConversationId]


@dataclass(frozen=True)
class SearchUserQuery(Query[SearchUserResult]):
    requester_id: UserId
    name: str


class SearchUserHandler(QueryHandler[SearchUserResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        conversation_repository: ConversationRepository,
    ):
        self._user_repository = user_repository
        self._conversation_repository = conversation_repository

    async def execute(self, query: SearchUserQuery) -> SearchUserResult:
        user = await find_user_by_name(self._user_repository, query.name)
        if not user:
            raise EntityNotFoundError(f"User {query.name.strip()} not found")

        conversation = None
        if user.id != query.requester_id:
            conversation = await self._conversation_repository.find_between_users(
                query.requester_id, user.id
            )
        return SearchUserResult(
            user=user,
            conversation_id=conversation.id if conversation else None,
        )
