"""
ConflictError - Raised when a uniqueness rule would be broken.
Maps to: HTTP 409 Conflict
"""

from chatline.domain.exceptions.base import DomainError


class ConflictError(DomainError):
    """Duplicate one-to-one conversation, group name or username."""

    kind = "Conflict"
