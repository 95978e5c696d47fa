"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by the
presentation layer, which maps each `kind` to an HTTP status code.
"""

from chatline.domain.exceptions.base import DomainError
from chatline.domain.exceptions.entity_not_found import EntityNotFoundError
from chatline.domain.exceptions.access_denied import AccessDeniedError
from chatline.domain.exceptions.validation_error import DomainValidationError
from chatline.domain.exceptions.conflict import ConflictError
from chatline.domain.exceptions.invalid_operation import InvalidOperationError
from chatline.domain.exceptions.unauthenticated import UnauthenticatedError

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "ConflictError",
    "InvalidOperationError",
    "UnauthenticatedError",
]
