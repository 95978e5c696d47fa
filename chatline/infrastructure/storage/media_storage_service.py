"""
MediaStorageService - Writes uploaded photos and gifs to disk.

Files land in Config.UPLOAD_DIR as `<owner>_<timestamp><ext>` and are served
back under Config.UPLOADS_URL_PREFIX by the static mount in the app factory.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Collection, Optional

from werkzeug.utils import secure_filename

from chatline.config.settings import Config
from chatline.domain.exceptions import DomainValidationError
from chatline.domain.ports.media_storage import MediaStorage, MediaUpload, StoredMedia
from chatline.domain.value_objects import ContentKind, UserId

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {
    ".jpg": ContentKind.PHOTO,
    ".jpeg": ContentKind.PHOTO,
    ".png": ContentKind.PHOTO,
    ".gif": ContentKind.GIF,
}

CHUNK_SIZE = 64 * 1024


def canonical_path(base: Path, *sub_paths: str) -> Path:
    """Resolve canonical path and prevent directory traversal"""
    base = base.resolve()
    target = (base / Path(*sub_paths)).resolve()
    try:
        target.relative_to(base)
    except ValueError:
        raise DomainValidationError("Attempted directory traversal in upload path")
    return target


class MediaStorageService(MediaStorage):
    def __init__(
        self,
        upload_dir: Optional[str] = None,
        max_upload_mb: Optional[float] = None,
        url_prefix: Optional[str] = None,
    ):
        self.upload_dir = Path(upload_dir or Config.UPLOAD_DIR)
        self.max_bytes = int((max_upload_mb or Config.MAX_UPLOAD_MB) * 1024 * 1024)
        self.url_prefix = url_prefix or Config.UPLOADS_URL_PREFIX

    def classify(self, filename: str) -> tuple[ContentKind, str]:
        """Return (kind, extension) or raise for a disallowed file type."""
        sanitized = secure_filename(filename or "")
        ext = os.path.splitext(sanitized)[1].lower()
        kind = ALLOWED_EXTENSIONS.get(ext)
        if kind is None:
            raise DomainValidationError("Invalid file type")
        return kind, ext

    async def store(
        self,
        upload: MediaUpload,
        owner_id: UserId,
        kinds: Optional[Collection[ContentKind]] = None,
    ) -> StoredMedia:
        kind, ext = self.classify(upload.filename)
        if kinds is not None and kind not in kinds:
            accepted = sorted(e for e, k in ALLOWED_EXTENSIONS.items() if k in kinds)
            raise DomainValidationError(
                f"File type must be one of: {', '.join(accepted)}"
            )

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S%f")
        file_name = f"{owner_id.value}_{timestamp}{ext}"
        file_path = canonical_path(self.upload_dir, file_name)

        written = 0
        with open(file_path, "wb") as out:
            while True:
                chunk = upload.stream.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > self.max_bytes:
                    break
                out.write(chunk)

        if written > self.max_bytes:
            file_path.unlink(missing_ok=True)
            raise DomainValidationError(
                f"File too large (max {self.max_bytes // 1024} KB)"
            )

        logger.debug(f"[MediaStorage] Saved {file_path} ({written} bytes)")
        return StoredMedia(kind=kind, path=f"{self.url_prefix}{file_name}")
