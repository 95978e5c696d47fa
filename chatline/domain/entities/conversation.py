"""
Conversation Entity - A one-on-one chat or a named group.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from chatline.domain.exceptions import DomainValidationError, InvalidOperationError
from chatline.domain.value_objects import ConversationId


@dataclass
class Conversation:
    id: ConversationId
    is_group: bool
    name: Optional[str]
    photo: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if self.is_group and not (self.name or "").strip():
            raise DomainValidationError("Group name is required")

    @classmethod
    def create_group(cls, name: str, photo: Optional[str] = None) -> Conversation:
        return cls(
            id=ConversationId(str(uuid4())),
            is_group=True,
            name=name.strip(),
            photo=photo,
        )

    @classmethod
    def create_one_to_one(cls, name: Optional[str] = None) -> Conversation:
        """The stored name of a one-on-one is informational only."""
        return cls(id=ConversationId(str(uuid4())), is_group=False, name=name)

    def rename(self, new_name: str) -> None:
        if not self.is_group:
            raise InvalidOperationError("Only group conversations can be renamed")
        new_name = (new_name or "").strip()
        if not new_name:
            raise DomainValidationError("Group name is required")
        self.name = new_name

    def set_photo(self, path: str) -> None:
        if not self.is_group:
            raise InvalidOperationError("Only group conversations have a photo")
        self.photo = path
