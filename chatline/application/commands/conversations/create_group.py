"""
CreateGroup Command - Create a named group with its initial members.

Every member name is resolved before anything is written, so an unknown
name leaves no half-built group behind.
"""

from dataclasses import dataclass, field
from typing import Optional

from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.application.common.lookups import find_user_by_name
from chatline.domain.entities.conversation import Conversation
from chatline.domain.entities.user import User
from chatline.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)
from chatline.domain.ports.media_storage import MediaStorage, MediaUpload
from chatline.domain.ports.repositories import ConversationRepository, UserRepository
from chatline.domain.value_objects import ContentKind, UserId


@dataclass(frozen=True)
class CreateGroupCommand(Command[Conversation]):
    creator_id: UserId
    name: str
    member_names: list[str] = field(default_factory=list)
    photo: Optional[MediaUpload] = None


class CreateGroupHandler(CommandHandler[Conversation]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        user_repository: UserRepository,
        media_storage: MediaStorage,
        ctx: RequestContext,
    ):
        self._conversation_repository = conversation_repository
        self._user_repository = user_repository
        self._media_storage = media_storage
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: CreateGroupCommand) -> Conversation:
        name = (command.name or "").strip()
        if not name:
            raise DomainValidationError("Group name is required")

        if await self._conversation_repository.find_group_by_name(name):
            raise ConflictError(f"A group named {name!r} already exists")

        members = await self._resolve_members(command)

        photo_path = None
        if command.photo is not None:
            stored = await self._media_storage.store(
                command.photo, command.creator_id, kinds={ContentKind.PHOTO}
            )
            photo_path = stored.path

        conversation = Conversation.create_group(name, photo=photo_path)
        await self._conversation_repository.save(conversation)
        await self._conversation_repository.add_member(conversation.id, command.creator_id)
        for member in members:
            await self._conversation_repository.add_member(conversation.id, member.id)

        self._logger.info(
            "Created group %s (%r) with %d member(s)",
            conversation.id,
            name,
            len(members) + 1,
        )
        return conversation

    async def _resolve_members(self, command: CreateGroupCommand) -> list[User]:
        """Look up member names; skip duplicates and the creator."""
        members: list[User] = []
        seen: set[UserId] = {command.creator_id}
        for raw_name in command.member_names:
            if not raw_name or not raw_name.strip():
                continue
            user = await find_user_by_name(self._user_repository, raw_name)
            if not user:
                raise EntityNotFoundError(f"User {raw_name.strip()} not found")
            if user.id in seen:
                continue
            seen.add(user.id)
            members.append(user)
        return members
