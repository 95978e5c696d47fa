"""
Base interfaces for CQRS pattern.

Every operation is a frozen Command (writes) or Query (reads) dataclass
handled by exactly one handler. The type parameter is the handler's result.

Usage:
    @dataclass(frozen=True)
    class CreateGroupCommand(Command[Conversation]):
        creator_id: UserId
        name: str

    class CreateGroupHandler(CommandHandler[Conversation]):
        def __init__(self, conversation_repository: ConversationRepository):
            self._conversation_repository = conversation_repository

        async def execute(self, command: CreateGroupCommand) -> Conversation:
            conversation = Conversation.create_group(command.name)
            await self._conversation_repository.save(conversation)
            return conversation
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

Result = TypeVar("Result")


class Command(ABC, Generic[Result]):
    """Intent to change state."""


class CommandHandler(ABC, Generic[Result]):
    @abstractmethod
    async def execute(self, command: Command[Result]) -> Result:
        """Apply the command; raise a DomainError when a rule is violated."""


class Query(ABC, Generic[Result]):
    """Read-only request."""


class QueryHandler(ABC, Generic[Result]):
    @abstractmethod
    async def execute(self, query: Query[Result]) -> Result:
        """Answer the query without changing state."""
