"""User DTOs for API responses."""

from typing import Optional
from pydantic import BaseModel

from chatline.domain.entities.user import User


class UserDTO(BaseModel):
    id: str
    name: str
    photo: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(id=user.id.value, name=user.name.value, photo=user.photo)
