"""
Message payloads: either text/emoji typed by the user or an uploaded file.
"""

from dataclasses import dataclass
from typing import Optional

from chatline.config.settings import Config
from chatline.domain.exceptions import DomainValidationError
from chatline.domain.ports.media_storage import MediaStorage, MediaUpload
from chatline.domain.value_objects import ContentKind, UserId


@dataclass(frozen=True)
class Payload:
    content: Optional[str] = None
    content_type: Optional[str] = None
    upload: Optional[MediaUpload] = None


async def resolve_payload(
    payload: Payload, media_storage: MediaStorage, owner_id: UserId
) -> tuple[str, ContentKind]:
    """Return (content, kind); uploads are stored first and yield photo or gif."""
    if payload.upload is not None:
        stored = await media_storage.store(payload.upload, owner_id)
        return stored.path, stored.kind

    if not payload.content or not payload.content_type:
        raise DomainValidationError(
            "Invalid input: content and content_type are required"
        )
    kind = ContentKind.parse(payload.content_type)
    if kind.is_media:
        raise DomainValidationError(f"A {kind.value} must be sent as a file upload")
    return payload.content, kind


def effective_photo(photo: Optional[str]) -> str:
    """Normalize a stored photo path under the uploads prefix, else the default."""
    if not photo:
        return Config.DEFAULT_PROFILE_PHOTO
    prefix = Config.UPLOADS_URL_PREFIX
    if photo.startswith(prefix):
        return photo
    return prefix + photo.lstrip("/")
