"""
ContentKind - Closed set of message/comment payload kinds.
"""

from enum import Enum

from chatline.domain.exceptions import DomainValidationError


class ContentKind(str, Enum):
    TEXT = "text"
    EMOJI = "emoji"
    PHOTO = "photo"
    GIF = "gif"

    @classmethod
    def parse(cls, raw: str) -> "ContentKind":
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            raise DomainValidationError(f"Unsupported content type: {raw}")

    @property
    def is_textual(self) -> bool:
        return self in (ContentKind.TEXT, ContentKind.EMOJI)

    @property
    def is_media(self) -> bool:
        return not self.is_textual
