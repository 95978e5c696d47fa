"""
SetUserPhoto Command - Store an uploaded profile photo.
"""

from dataclasses import dataclass

from chatline.application.common.context import RequestContext
from chatline.application.common.interfaces import Command, CommandHandler
from chatline.domain.entities.user import User
from chatline.domain.exceptions import EntityNotFoundError
from chatline.domain.ports.media_storage import MediaStorage, MediaUpload
from chatline.domain.ports.repositories import UserRepository
from chatline.domain.value_objects import ContentKind, UserId


@dataclass(frozen=True)
class SetUserPhotoCommand(Command[User]):
    user_id: UserId
    upload: MediaUpload


class SetUserPhotoHandler(CommandHandler[User]):
    def __init__(
        self,
        user_repository: UserRepository,
        media_storage: MediaStorage,
        ctx: RequestContext,
    ):
        self._user_repository = user_repository
        self._media_storage = media_storage
        self._logger = ctx.get_logger(__name__)

    async def execute(self, command: SetUserPhotoCommand) -> User:
        user = await self._user_repository.get_by_id(command.user_id)
        if not user:
            raise EntityNotFoundError(f"User {command.user_id} not found")

        stored = await self._media_storage.store(
            command.upload, user.id, kinds={ContentKind.PHOTO}
        )

        user.set_photo(stored.path)
        await self._user_repository.save(user)
        self._logger.info("Updated photo of user %s to %s", user.id, stored.path)
        return user
