"""
Prisma User Repository Implementation.

Maps the `users` table to User entities. Renaming runs in a Prisma
transaction together with the one-on-one conversation name cascade.
"""

from typing import Optional
from prisma import Prisma
from prisma.errors import UniqueViolationError
from prisma.models import User as PrismaUser

from chatline.domain.entities.user import User
from chatline.domain.exceptions import ConflictError
from chatline.domain.ports.repositories import UserRepository
from chatline.domain.value_objects import UserId, UserName


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> User:
        """Map Prisma record to domain entity."""
        return User(id=UserId(record.id), name=UserName(record.name), photo=record.photo)

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"id": user_id.value})
        return self._to_entity(record) if record else None

    async def get_by_name(self, name: UserName) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"name": name.value})
        return self._to_entity(record) if record else None

    async def save(self, user: User) -> None:
        """Save (create or update) user."""
        try:
            await self._prisma.user.upsert(
                where={"id": user.id.value},
                data={
                    "create": {
                        "id": user.id.value,
                        "name": user.name.value,
                        "photo": user.photo,
                    },
                    "update": {"name": user.name.value, "photo": user.photo},
                },
            )
        except UniqueViolationError as e:
            raise ConflictError("Username already taken") from e

    async def rename(self, user_id: UserId, new_name: UserName) -> None:
        try:
            async with self._prisma.tx() as transaction:
                taken = await transaction.user.find_first(
                    where={"name": new_name.value, "NOT": [{"id": user_id.value}]}
                )
                if taken:
                    raise ConflictError("Username already taken")

                await transaction.user.update(
                    where={"id": user_id.value}, data={"name": new_name.value}
                )
                await transaction.conversation.update_many(
                    where={
                        "is_group": False,
                        "members": {"some": {"user_id": user_id.value}},
                    },
                    data={"name": new_name.value},
                )
        except UniqueViolationError as e:
            raise ConflictError("Username already taken") from e
