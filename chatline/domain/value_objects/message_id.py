"""
MessageId Value Object - UUID wrapper for message identity.
"""

from dataclasses import dataclass

from chatline.domain.exceptions import DomainValidationError
from chatline.domain.value_objects._uuid import is_valid_uuid


@dataclass(frozen=True)
class MessageId:
    value: str

    def __post_init__(self):
        if not is_valid_uuid(self.value):
            raise DomainValidationError(f"Invalid message ID (UUID): {self.value}")

    def __str__(self) -> str:
        return self.value
