"""
InvalidOperationError - Raised when an operation does not apply to the target.
Maps to: HTTP 400 Bad Request
"""

from chatline.domain.exceptions.base import DomainError


class InvalidOperationError(DomainError):
    kind = "InvalidOperation"
