"""
UserName Value Object - Display name, unique across users.
"""

from dataclasses import dataclass

from chatline.domain.exceptions import DomainValidationError

MAX_USERNAME_LENGTH = 25


@dataclass(frozen=True)
class UserName:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise DomainValidationError("Username must be a string")
        # Surrounding whitespace is not part of the name
        object.__setattr__(self, "value", self.value.strip())
        if not self.value:
            raise DomainValidationError("Username cannot be empty")
        if len(self.value) > MAX_USERNAME_LENGTH:
            raise DomainValidationError(
                f"Username must be at most {MAX_USERNAME_LENGTH} characters"
            )

    def __str__(self) -> str:
        return self.value
