"""
DomainError - Common base for tagged business errors.
"""


class DomainError(Exception):
    """Base class for errors surfaced to the caller of an operation."""

    kind: str = "Internal"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
