"""
AccessDeniedError - Raised when user lacks permission to access a resource.
Maps to: HTTP 403 Forbidden
"""

from chatline.domain.exceptions.base import DomainError


class AccessDeniedError(DomainError):
    """Raised when user is not a member or not the owner"""

    kind = "Forbidden"

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
