"""
CommentId Value Object - UUID wrapper for comment identity.
"""

from dataclasses import dataclass

from chatline.domain.exceptions import DomainValidationError
from chatline.domain.value_objects._uuid import is_valid_uuid


@dataclass(frozen=True)
class CommentId:
    value: str

    def __post_init__(self):
        if not is_valid_uuid(self.value):
            raise DomainValidationError(f"Invalid comment ID (UUID): {self.value}")

    def __str__(self) -> str:
        return self.value
