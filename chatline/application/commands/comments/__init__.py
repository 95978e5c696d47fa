"""Comment commands."""

from .add_comment import AddCommentCommand, AddCommentHandler, AddCommentResult
from .remove_comment import RemoveCommentCommand, RemoveCommentHandler

__all__ = [
    "AddCommentCommand",
    "AddCommentHandler",
    "AddCommentResult",
    "RemoveCommentCommand",
    "RemoveCommentHandler",
]
