"""
Comment Repository Port - Interface for comment persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatline.domain.entities.comment import Comment
from chatline.domain.value_objects import CommentId, MessageId


class CommentRepository(ABC):
    @abstractmethod
    async def get_by_id(self, comment_id: CommentId) -> Optional[Comment]: ...

    @abstractmethod
    async def get_by_message(self, message_id: MessageId) -> list[Comment]: ...

    @abstractmethod
    async def save(self, comment: Comment) -> None: ...

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool: ...
