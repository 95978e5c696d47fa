"""Name lookups shared by handlers that take usernames as raw input."""

from typing import Optional

from chatline.domain.entities.user import User
from chatline.domain.exceptions import DomainValidationError
from chatline.domain.ports.repositories import UserRepository
from chatline.domain.value_objects import UserName


async def find_user_by_name(
    user_repository: UserRepository, raw_name: Optional[str]
) -> Optional[User]:
    """
    Look up a user by name.

    A name that could never have been registered (blank or too long) simply
    matches nobody, so callers report it as not found.
    """
    try:
        name = UserName(raw_name)
    except DomainValidationError:
        return None
    return await user_repository.get_by_name(name)
