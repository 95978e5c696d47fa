"""Comment queries."""

from .list_comments import CommentView, ListCommentsHandler, ListCommentsQuery

__all__ = ["CommentView", "ListCommentsHandler", "ListCommentsQuery"]
