"""Adapts FastAPI's UploadFile to the MediaUpload port type."""

from typing import Optional

from fastapi import UploadFile

from chatline.domain.ports.media_storage import MediaUpload


def to_media_upload(file: Optional[UploadFile]) -> Optional[MediaUpload]:
    # Browsers send an empty part when no file was chosen
    if file is None or not file.filename:
        return None
    return MediaUpload(stream=file.file, filename=file.filename)
