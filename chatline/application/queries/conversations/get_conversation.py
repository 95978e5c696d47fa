"""
GetConversation Query - Conversation header plus its full message history.

A conversation that does not exist is NotFound; one the requester is not in
is Forbidden. Messages come oldest first, each with the sender's name and
photo and, for replies, a snapshot of the message replied to.
"""

from dataclasses import dataclass
from typing import Optional

from chatline.application.common.authorization import AuthorizationGuard
from chatline.application.common.interfaces import Query, QueryHandler
from chatline.application.common.payload import effective_photo
from chatline.domain.entities.conversation import Conversation
from chatline.domain.entities.message import Message
from chatline.domain.entities.user import User
from chatline.domain.exceptions import EntityNotFoundError
from chatline.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    UserRepository,
)
from chatline.domain.value_objects import ConversationId, UserId


@dataclass
class MessageView:
    message: Message
    sender_name: str
    sender_photo: str
    reply_content: Optional[str] = None
    reply_sender_name: Optional[str] = None


@dataclass
class ConversationDetail:
    conversation: Conversation
    name: str
    photo: str
    members: list[User]
    messages: list[MessageView]


@dataclass(frozen=True)
class GetConversationQuery(Query[ConversationDetail]):
    conversation_id: ConversationId
    requester_id: UserId


class GetConversationHandler(QueryHandler[ConversationDetail]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        guard: AuthorizationGuard,
    ):
        self._conversation_repository = conversation_repository
        self._message_repository = message_repository
        self._user_repository = user_repository
        self._guard = guard

    async def execute(self, query: GetConversationQuery) -> ConversationDetail:
        """
        Raises:
            EntityNotFoundError: If the conversation doesn't exist
            AccessDeniedError: If the requester is not a member
        """
        conversation = await self._conversation_repository.get_by_id(
            query.conversation_id
        )
        if not conversation:
            raise EntityNotFoundError(
                f"Conversation {query.conversation_id.value} not found"
            )
        await self._guard.require_member(query.requester_id, query.conversation_id)

        users: dict[UserId, Optional[User]] = {}

        async def load_user(user_id: UserId) -> Optional[User]:
            if user_id not in users:
                users[user_id] = await self._user_repository.get_by_id(user_id)
            return users[user_id]

        members = []
        for member_id in await self._conversation_repository.list_member_ids(
            conversation.id
        ):
            member = await load_user(member_id)
            if member:
                members.append(member)

        messages = await self._message_repository.get_by_conversation(conversation.id)
        by_id = {message.id: message for message in messages}

        views = []
        for message in messages:
            sender = await load_user(message.sender_id)
            view = MessageView(
                message=message,
                sender_name=sender.name.value if sender else "",
                sender_photo=effective_photo(sender.photo if sender else None),
            )
            replied = by_id.get(message.reply_to) if message.reply_to else None
            if replied:
                replied_sender = await load_user(replied.sender_id)
                view.reply_content = replied.content
                view.reply_sender_name = (
                    replied_sender.name.value if replied_sender else None
                )
            views.append(view)

        name, photo = self._header(conversation, members, query.requester_id)
        return ConversationDetail(
            conversation=conversation,
            name=name,
            photo=photo,
            members=members,
            messages=views,
        )

    @staticmethod
    def _header(
        conversation: Conversation, members: list[User], requester_id: UserId
    ) -> tuple[str, str]:
        if conversation.is_group:
            return conversation.name or "", effective_photo(conversation.photo)
        counterpart = next((m for m in members if m.id != requester_id), None)
        if not counterpart:
            return conversation.name or "", effective_photo(conversation.photo)
        return counterpart.name.value, effective_photo(counterpart.photo)
