import asyncio
import io
from pathlib import Path
from uuid import uuid4

import pytest

from chatline.domain.exceptions import DomainValidationError
from chatline.domain.ports.media_storage import MediaUpload
from chatline.domain.value_objects import ContentKind, UserId

OWNER = UserId(str(uuid4()))


def _store(media_storage, data, filename):
    upload = MediaUpload(stream=io.BytesIO(data), filename=filename)
    return asyncio.run(media_storage.store(upload, OWNER))


def test_photo_is_written_under_uploads(media_storage, tmp_path):
    stored = _store(media_storage, b"\x89PNG fake", "holiday.PNG")

    assert stored.kind is ContentKind.PHOTO
    assert stored.path.startswith("/uploads/" + OWNER.value + "_")
    assert stored.path.endswith(".png")
    written = tmp_path / Path(stored.path).name
    assert written.read_bytes() == b"\x89PNG fake"


def test_gif_is_classified_as_gif(media_storage):
    assert _store(media_storage, b"GIF89a", "party.gif").kind is ContentKind.GIF


@pytest.mark.parametrize("filename", ["notes.pdf", "script.sh", "noextension", ""])
def test_disallowed_extension_is_rejected(media_storage, filename):
    with pytest.raises(DomainValidationError):
        _store(media_storage, b"data", filename)


def test_upload_over_limit_is_rejected_and_removed(media_storage, tmp_path):
    too_big = b"0" * (media_storage.max_bytes + 10)
    with pytest.raises(DomainValidationError, match="too large"):
        _store(media_storage, too_big, "big.jpg")
    assert list(tmp_path.iterdir()) == []


def test_upload_within_limit_is_accepted(media_storage):
    stored = _store(media_storage, b"0" * (media_storage.max_bytes - 1000), "small.jpg")
    assert stored.kind is ContentKind.PHOTO


def test_kind_outside_accepted_kinds_writes_nothing(media_storage, tmp_path):
    upload = MediaUpload(stream=io.BytesIO(b"GIF89a"), filename="party.gif")

    with pytest.raises(DomainValidationError, match="must be one of"):
        asyncio.run(media_storage.store(upload, OWNER, kinds={ContentKind.PHOTO}))
    assert list(tmp_path.iterdir()) == []
