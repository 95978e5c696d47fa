"""
DomainValidationError - Raised for malformed identifiers or missing/invalid input.
Maps to: HTTP 400 Bad Request
"""

from chatline.domain.exceptions.base import DomainError


class DomainValidationError(DomainError, ValueError):
    """Exception raised for domain validation errors."""

    kind = "InvalidInput"
