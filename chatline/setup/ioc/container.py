"""
Dishka DI Container Setup.

- AppProvider: handlers, the authorization guard, media storage and the
  per-request logging context
- A persistence provider maps the repository ports to either the in-memory
  adapter or Prisma, picked by Config.PERSISTENCE_BACKEND

Scopes:
- Scope.APP = created once, shared across all requests (store, Prisma client)
- Scope.REQUEST = new instance per HTTP request (repositories, handlers)
"""

from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from dishka.integrations.fastapi import FastapiProvider
from starlette.requests import Request

from chatline.application.commands.comments import AddCommentHandler, RemoveCommentHandler
from chatline.application.commands.conversations import (
    AddMembersHandler,
    CreateGroupHandler,
    CreateOneToOneHandler,
    LeaveGroupHandler,
    RenameGroupHandler,
    SetGroupPhotoHandler,
)
from chatline.application.commands.messages import (
    DeleteMessageHandler,
    ForwardMessageHandler,
    SendFirstMessageHandler,
    SendMessageHandler,
)
from chatline.application.commands.users import (
    LoginOrCreateHandler,
    RenameUserHandler,
    SetUserPhotoHandler,
)
from chatline.application.common.authorization import AuthorizationGuard
from chatline.application.common.context import RequestContext
from chatline.application.queries.comments import ListCommentsHandler
from chatline.application.queries.conversations import (
    GetConversationHandler,
    ListConversationsHandler,
)
from chatline.application.queries.users import (
    GetUserHandler,
    ResolveIdentityHandler,
    SearchUserHandler,
)
from chatline.config.settings import Config
from chatline.domain.ports.media_storage import MediaStorage
from chatline.domain.ports.repositories import (
    CommentRepository,
    ConversationRepository,
    MessageRepository,
    UserRepository,
)
from chatline.infrastructure.persistence.memory import (
    InMemoryCommentRepository,
    InMemoryConversationRepository,
    InMemoryMessageRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from chatline.infrastructure.storage import MediaStorageService


class InMemoryPersistenceProvider(Provider):
    """Repositories backed by one process-local store."""

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, store: InMemoryStore) -> ConversationRepository:
        return InMemoryConversationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, store: InMemoryStore) -> MessageRepository:
        return InMemoryMessageRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        return InMemoryCommentRepository(store)


class AppProvider(Provider):
    """
    Application dependency provider.

    Handlers ask for repository ports (abstract); the persistence provider
    decides which implementation they get.
    """

    # ==================== REQUEST CONTEXT ====================

    @provide(scope=Scope.REQUEST)
    def get_request_context(self, request: Request) -> RequestContext:
        """Correlation id set by CorrelationIdMiddleware, user bound later by auth."""
        correlation_id = getattr(request.state, "correlation_id", None)
        if correlation_id:
            return RequestContext(correlation_id=correlation_id)
        return RequestContext()

    # ==================== SERVICES ====================

    @provide(scope=Scope.APP)
    def get_media_storage(self) -> MediaStorage:
        return MediaStorageService()

    @provide(scope=Scope.REQUEST)
    def get_authorization_guard(
        self,
        conversation_repository: ConversationRepository,
        comment_repository: CommentRepository,
    ) -> AuthorizationGuard:
        return AuthorizationGuard(conversation_repository, comment_repository)

    # ==================== USER HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_resolve_identity_handler(
        self, user_repository: UserRepository
    ) -> ResolveIdentityHandler:
        return ResolveIdentityHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_login_handler(
        self, user_repository: UserRepository, ctx: RequestContext
    ) -> LoginOrCreateHandler:
        return LoginOrCreateHandler(user_repository, ctx)

    @provide(scope=Scope.REQUEST)
    def get_rename_user_handler(
        self, user_repository: UserRepository, ctx: RequestContext
    ) -> RenameUserHandler:
        return RenameUserHandler(user_repository, ctx)

    @provide(scope=Scope.REQUEST)
    def get_set_user_photo_handler(
        self,
        user_repository: UserRepository,
        media_storage: MediaStorage,
        ctx: RequestContext,
    ) -> SetUserPhotoHandler:
        return SetUserPhotoHandler(user_repository, media_storage, ctx)

    @provide(scope=Scope.REQUEST)
    def get_get_user_handler(self, user_repository: UserRepository) -> GetUserHandler:
        return GetUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_search_user_handler(
        self,
        user_repository: UserRepository,
        conversation_repository: ConversationRepository,
    ) -> SearchUserHandler:
        return SearchUserHandler(user_repository, conversation_repository)

    # ==================== CONVERSATION HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_one_to_one_handler(
        self,
        conversation_repository: ConversationRepository,
        user_repository: UserRepository,
        ctx: RequestContext,
    ) -> CreateOneToOneHandler:
        return CreateOneToOneHandler(conversation_repository, user_repository, ctx)

    @provide(scope=Scope.REQUEST)
    def get_create_group_handler(
        self,
        conversation_repository: ConversationRepository,
        user_repository: UserRepository,
        media_storage: MediaStorage,
        ctx: RequestContext,
    ) -> CreateGroupHandler:
        return CreateGroupHandler(
            conversation_repository, user_repository, media_storage, ctx
        )

    @provide(scope=Scope.REQUEST)
    def get_add_members_handler(
        self,
        conversation_repository: ConversationRepository,
        user_repository: UserRepository,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ) -> AddMembersHandler:
        return AddMembersHandler(conversation_repository, user_repository, guard, ctx)

    @provide(scope=Scope.REQUEST)
    def get_leave_group_handler(
        self,
        conversation_repository: ConversationRepository,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ) -> LeaveGroupHandler:
        return LeaveGroupHandler(conversation_repository, guard, ctx)

    @provide(scope=Scope.REQUEST)
    def get_rename_group_handler(
        self,
        conversation_repository: ConversationRepository,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ) -> RenameGroupHandler:
        return RenameGroupHandler(conversation_repository, guard, ctx)

    @provide(scope=Scope.REQUEST)
    def get_set_group_photo_handler(
        self,
        conversation_repository: ConversationRepository,
        media_storage: MediaStorage,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ) -> SetGroupPhotoHandler:
        return SetGroupPhotoHandler(conversation_repository, media_storage, guard, ctx)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self, conversation_repository: ConversationRepository
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_conversation_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        guard: AuthorizationGuard,
    ) -> GetConversationHandler:
        return GetConversationHandler(
            conversation_repository, message_repository, user_repository, guard
        )

    # ==================== MESSAGE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        media_storage: MediaStorage,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            message_repository, user_repository, media_storage, guard, ctx
        )

    @provide(scope=Scope.REQUEST)
    def get_send_first_message_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        media_storage: MediaStorage,
        ctx: RequestContext,
    ) -> SendFirstMessageHandler:
        return SendFirstMessageHandler(
            conversation_repository,
            message_repository,
            user_repository,
            media_storage,
            ctx,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_message_handler(
        self,
        message_repository: MessageRepository,
        ctx: RequestContext,
    ) -> DeleteMessageHandler:
        return DeleteMessageHandler(message_repository, ctx)

    @provide(scope=Scope.REQUEST)
    def get_forward_message_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ) -> ForwardMessageHandler:
        return ForwardMessageHandler(
            conversation_repository, message_repository, user_repository, guard, ctx
        )

    # ==================== COMMENT HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_add_comment_handler(
        self,
        comment_repository: CommentRepository,
        message_repository: MessageRepository,
        media_storage: MediaStorage,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ) -> AddCommentHandler:
        return AddCommentHandler(
            comment_repository, message_repository, media_storage, guard, ctx
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_comment_handler(
        self,
        comment_repository: CommentRepository,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ) -> RemoveCommentHandler:
        return RemoveCommentHandler(comment_repository, guard, ctx)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_handler(
        self,
        comment_repository: CommentRepository,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        guard: AuthorizationGuard,
    ) -> ListCommentsHandler:
        return ListCommentsHandler(
            comment_repository, message_repository, user_repository, guard
        )


def persistence_provider(backend: Optional[str] = None) -> Provider:
    backend = (backend or Config.PERSISTENCE_BACKEND).lower()
    if backend == "memory":
        return InMemoryPersistenceProvider()
    if backend == "prisma":
        # Imported lazily: the Prisma client only exists after `prisma generate`
        from chatline.setup.ioc.prisma_provider import PrismaPersistenceProvider

        return PrismaPersistenceProvider()
    raise ValueError(f"Unknown PERSISTENCE_BACKEND: {backend}")


def create_container(backend: Optional[str] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    - make_async_container() creates the container with all providers
    - Call this ONCE per application instance
    """
    return make_async_container(
        AppProvider(), persistence_provider(backend), FastapiProvider()
    )
