"""
User Repository Port - Interface for user persistence.
Implementations: chatline/infrastructure/persistence/{prisma,memory}_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatline.domain.entities.user import User
from chatline.domain.value_objects import UserId, UserName


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_by_name(self, name: UserName) -> Optional[User]: ...

    @abstractmethod
    async def save(self, user: User) -> None: ...

    @abstractmethod
    async def rename(self, user_id: UserId, new_name: UserName) -> None:
        """
        Atomically rename a user and rewrite the stored name of every
        one-on-one conversation they belong to.

        Raises ConflictError when another user already owns `new_name`.
        Nothing is written if any step fails.
        """
