"""
API Routers - FastAPI endpoint definitions.
"""

from chatline.presentation.api.session import router as session_router
from chatline.presentation.api.users import (
    router as users_router,
    search_router,
)
from chatline.presentation.api.conversations import router as conversations_router
from chatline.presentation.api.groups import router as groups_router
from chatline.presentation.api.comments import (
    router as comments_router,
    messages_router,
)

__all__ = [
    "session_router",
    "users_router",
    "search_router",
    "conversations_router",
    "groups_router",
    "comments_router",
    "messages_router",
]
