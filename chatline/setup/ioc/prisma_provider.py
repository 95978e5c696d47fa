"""
Prisma persistence provider.

Maps every repository port to its Prisma implementation. The client is
app-scoped: connected on first use and disconnected when the container
closes.
"""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from chatline.domain.ports.repositories import (
    CommentRepository,
    ConversationRepository,
    MessageRepository,
    UserRepository,
)
from chatline.infrastructure.persistence.prisma_comment_repository import (
    PrismaCommentRepository,
)
from chatline.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from chatline.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from chatline.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)


class PrismaPersistenceProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - async because connect() is async
        - disconnects when the container is closed at shutdown
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, prisma: Prisma) -> ConversationRepository:
        """
        - Return type is ABSTRACT (ConversationRepository)
        - Implementation is CONCRETE (PrismaConversationRepository)
        """
        return PrismaConversationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, prisma: Prisma) -> CommentRepository:
        return PrismaCommentRepository(prisma)
