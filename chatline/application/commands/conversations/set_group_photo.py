"""
SetGroupPhoto Command - Store an uploaded group picture.
"""

from dataclasses import dataclass

from chatline.application.common.authorization import AuthorizationGuard
from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.domain.entities.conversation import Conversation
from chatline.domain.exceptions import EntityNotFoundError
from chatline.domain.ports.media_storage import MediaStorage, MediaUpload
from chatline.domain.ports.repositories import ConversationRepository
from chatline.domain.value_objects import ContentKind, ConversationId, UserId


@dataclass(frozen=True)
class SetGroupPhotoCommand(Command[Conversation]):
    conversation_id: ConversationId
    requester_id: UserId
    upload: MediaUpload


class SetGroupPhotoHandler(CommandHandler[Conversation]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        media_storage: MediaStorage,
        guard: AuthorizationGuard,
        ctx: RequestContext,
    ):
        self._conversation_repository = conversation_repository
        self._media_storage = media_storage
        self._guard = guard
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: SetGroupPhotoCommand) -> Conversation:
        await self._guard.require_group(command.conversation_id)
        await self._guard.require_member(
            command.requester_id,
            command.conversation_id,
            "You are not a member of this group",
        )

        conversation = await self._conversation_repository.get_by_id(
            command.conversation_id
        )
        if not conversation:
            raise EntityNotFoundError("Conversation not found")

        stored = await self._media_storage.store(
            command.upload, command.requester_id, kinds={ContentKind.PHOTO}
        )

        conversation.set_photo(stored.path)
        await self._conversation_repository.save(conversation)
        self._logger.info("Updated photo of group %s", conversation.id)
        return conversation
