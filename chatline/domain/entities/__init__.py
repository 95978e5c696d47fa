"""
ENTITIES - Domain objects with identity

Entities are mutable dataclasses compared by their id. Factories generate
ids and UTC timestamps; state changes go through methods that enforce the
group-only rules.
"""

from chatline.domain.entities.user import User
from chatline.domain.entities.conversation import Conversation
from chatline.domain.entities.message import Message
from chatline.domain.entities.comment import Comment, promote_comments

__all__ = ["User", "Conversation", "Message", "Comment", "promote_comments"]
