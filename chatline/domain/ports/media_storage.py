"""
Media Storage Port - Where uploaded photos and gifs end up.
Implementation: chatline/infrastructure/storage/media_storage_service.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Collection, Optional

from chatline.domain.value_objects import ContentKind, UserId


@dataclass(frozen=True)
class MediaUpload:
    stream: BinaryIO
    filename: str


@dataclass(frozen=True)
class StoredMedia:
    kind: ContentKind
    path: str  # public path, e.g. /uploads/<owner>_<timestamp>.png


class MediaStorage(ABC):
    @abstractmethod
    async def store(
        self,
        upload: MediaUpload,
        owner_id: UserId,
        kinds: Optional[Collection[ContentKind]] = None,
    ) -> StoredMedia:
        """
        Persist an upload. `.jpg/.jpeg/.png` are photos, `.gif` is a gif;
        anything else, a kind outside `kinds` (when given), or a file over
        the size limit raises DomainValidationError before anything is kept.
        """
