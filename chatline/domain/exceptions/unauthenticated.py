"""
UnauthenticatedError - Raised when the bearer token is missing or malformed.
Maps to: HTTP 401 Unauthorized
"""

from chatline.domain.exceptions.base import DomainError


class UnauthenticatedError(DomainError):
    kind = "Unauthenticated"

    def __init__(self, message: str = "Unauthorized: missing or invalid token"):
        super().__init__(message)
