"""Conversation DTOs for API responses."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from chatline.application.dto.message import MessageDTO
from chatline.application.dto.user import UserDTO


class ConversationSummaryDTO(BaseModel):
    id: str
    is_group: bool
    name: str
    photo: str
    last_activity: datetime
    member_count: int
    last_message: Optional[str] = None
    last_message_type: Optional[str] = None


class ConversationDTO(BaseModel):
    id: str
    is_group: bool
    name: str
    photo: str
    created_at: datetime
    members: list[UserDTO]
    messages: list[MessageDTO]
