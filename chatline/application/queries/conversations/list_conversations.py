"""
ListConversations Query - The conversation list shown in a user's sidebar.

Each entry carries the effective name and photo (the counterpart's for a
one-on-one), a preview of the latest message and the last activity time,
newest activity first.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from chatline.application.common.interfaces import Query, QueryHandler
from chatline.application.common.payload import effective_photo
from chatline.domain.ports.repositories import ConversationOverview, ConversationRepository
from chatline.domain.value_objects import ContentKind, ConversationId, UserId


@dataclass
class ConversationSummary:
    id: ConversationId
    is_group: bool
    name: str
    photo: str
    last_activity: datetime
    member_count: int
    last_message: Optional[str] = None
    last_message_kind: Optional[ContentKind] = None


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[ConversationSummary]]):
    user_id: UserId


class ListConversationsHandler(QueryHandler[list[ConversationSummary]]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, query: ListConversationsQuery) -> list[ConversationSummary]:
        overviews = await self._conversation_repository.list_for_user(query.user_id)
        summaries = [self._summarize(overview) for overview in overviews]
        summaries.sort(key=lambda s: s.last_activity, reverse=True)
        return summaries

    @staticmethod
    def _summarize(overview: ConversationOverview) -> ConversationSummary:
        conversation = overview.conversation
        counterpart = overview.counterpart
        last = overview.last_message

        if conversation.is_group:
            name = conversation.name or ""
        else:
            name = counterpart.name.value if counterpart else (conversation.name or "")

        photo = counterpart.photo if counterpart and counterpart.photo else conversation.photo

        last_activity = conversation.created_at
        if last and last.created_at > last_activity:
            last_activity = last.created_at

        return ConversationSummary(
            id=conversation.id,
            is_group=conversation.is_group,
            name=name,
            photo=effective_photo(photo),
            last_activity=last_activity,
            member_count=overview.member_count,
            last_message=last.content if last else None,
            last_message_kind=last.content_kind if last else None,
        )
