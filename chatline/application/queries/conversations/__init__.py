"""Conversation queries."""

from .list_conversations import (
    ConversationSummary,
    ListConversationsHandler,
    ListConversationsQuery,
)
from .get_conversation import (
    ConversationDetail,
    GetConversationHandler,
    GetConversationQuery,
    MessageView,
)

__all__ = [
    "ConversationSummary",
    "ListConversationsHandler",
    "ListConversationsQuery",
    "ConversationDetail",
    "GetConversationHandler",
    "GetConversationQuery",
    "MessageView",
]
