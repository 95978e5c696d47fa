"""
ListComments Query - Comments of a message, oldest first, with author names.
"""

from dataclasses import dataclass

from chatline.application.common.authorization import AuthorizationGuard
from chatline.application.common.interfaces import Query, QueryHandler
from chatline.domain.entities.comment import Comment
from chatline.domain.exceptions import EntityNotFoundError
from chatline.domain.ports.repositories import (
    CommentRepository,
    MessageRepository,
    UserRepository,
)
from chatline.domain.value_objects import MessageId, UserId


@dataclass
class CommentView:
    comment: Comment
    author_name: str


@dataclass(frozen=True)
class ListCommentsQuery(Query[list[CommentView]]):
    message_id: MessageId
    requester_id: UserId


class ListCommentsHandler(QueryHandler[list[CommentView]]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        guard: AuthorizationGuard,
    ):
        self._comment_repository = comment_repository
        self._message_repository = message_repository
        self._user_repository = user_repository
        self._guard = guard

    async def execute(self, query: ListCommentsQuery) -> list[CommentView]:
        message = await self._message_repository.get_by_id(query.message_id)
        if not message:
            raise EntityNotFoundError("Message not found")
        await self._guard.require_member(query.requester_id, message.conversation_id)

        comments = await self._comment_repository.get_by_message(query.message_id)
        names: dict[UserId, str] = {}
        views = []
        for comment in sorted(comments, key=lambda c: c.created_at):
            if comment.author_id not in names:
                author = await self._user_repository.get_by_id(comment.author_id)
                names[comment.author_id] = author.name.value if author else ""
            views.append(CommentView(comment=comment, author_name=names[comment.author_id]))
        return views
