"""
DTOs - Data Transfer Objects

Pydantic models returned by the API routers. They are built from domain
entities and query results, never the other way around.
"""

from chatline.application.dto.user import UserDTO
from chatline.application.dto.message import CommentDTO, MessageDTO
from chatline.application.dto.conversation import ConversationDTO, ConversationSummaryDTO

__all__ = [
    "UserDTO",
    "MessageDTO",
    "CommentDTO",
    "ConversationDTO",
    "ConversationSummaryDTO",
]
