"""In-memory UserRepository."""

from typing import Optional

from chatline.domain.entities.user import User
from chatline.domain.exceptions import ConflictError
from chatline.domain.ports.repositories import UserRepository
from chatline.domain.value_objects import UserId, UserName
from chatline.infrastructure.persistence.memory.store import InMemoryStore, Tables


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        user = self._store.tables.users.get(user_id.value)
        return self._store.copy(user) if user else None

    async def get_by_name(self, name: UserName) -> Optional[User]:
        for user in self._store.tables.users.values():
            if user.name == name:
                return self._store.copy(user)
        return None

    async def save(self, user: User) -> None:
        users = self._store.tables.users
        for other in users.values():
            if other.name == user.name and other.id != user.id:
                raise ConflictError("Username already taken")
        users[user.id.value] = self._store.copy(user)

    async def rename(self, user_id: UserId, new_name: UserName) -> None:
        with self._store.transaction() as tables:
            for other in tables.users.values():
                if other.name == new_name and other.id != user_id:
                    raise ConflictError("Username already taken")

            user = tables.users.get(user_id.value)
            if user is None:
                return
            user.rename(new_name)
            self._rename_one_to_ones(tables, user_id, new_name)

    def _rename_one_to_ones(
        self, tables: Tables, user_id: UserId, new_name: UserName
    ) -> None:
        conversation_ids = {
            c_id for c_id, u_id in tables.members if u_id == user_id.value
        }
        for c_id in conversation_ids:
            conversation = tables.conversations.get(c_id)
            if conversation and not conversation.is_group:
                conversation.name = new_name.value
