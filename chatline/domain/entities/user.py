"""
User Entity - A person who can log in, chat and comment.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

from chatline.domain.value_objects import UserId, UserName


@dataclass
class User:
    id: UserId
    name: UserName
    photo: Optional[str] = None

    @classmethod
    def create(cls, name: UserName) -> User:
        """Factory method for a first login; the generated id is the bearer token."""
        return cls(id=UserId(str(uuid4())), name=name)

    def rename(self, new_name: UserName) -> None:
        self.name = new_name

    def set_photo(self, path: str) -> None:
        self.photo = path
