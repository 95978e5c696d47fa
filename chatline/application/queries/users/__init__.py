"""User queries."""

from .resolve_identity import ResolveIdentityQuery, ResolveIdentityHandler
from .get_user import GetUserQuery, GetUserHandler
from .search_user import SearchUserQuery, SearchUserHandler, SearchUserResult

__all__ = [
    "ResolveIdentityQuery",
    "ResolveIdentityHandler",
    "GetUserQuery",
    "GetUserHandler",
    "SearchUserQuery",
    "SearchUserHandler",
    "SearchUserResult",
]
