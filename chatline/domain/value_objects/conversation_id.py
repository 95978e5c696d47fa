"""
ConversationId Value Object - UUID wrapper for conversation identity.
"""

from dataclasses import dataclass

from chatline.domain.exceptions import DomainValidationError
from chatline.domain.value_objects._uuid import is_valid_uuid


@dataclass(frozen=True)
class ConversationId:
    value: str

    def __post_init__(self):
        if not is_valid_uuid(self.value):
            raise DomainValidationError(f"Invalid conversation ID (UUID): {self.value}")

    def __str__(self) -> str:
        return self.value
