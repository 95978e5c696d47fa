from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from chatline.domain.entities import Comment, Conversation, Message, promote_comments
from chatline.domain.exceptions import DomainValidationError, InvalidOperationError
from chatline.domain.value_objects import (
    ContentKind,
    ConversationId,
    MessageStatus,
    UserId,
    UserName,
)


def test_user_name_is_trimmed_and_bounded():
    assert UserName("  alice ").value == "alice"
    assert UserName("a" * 25).value == "a" * 25
    with pytest.raises(DomainValidationError):
        UserName("a" * 26)
    with pytest.raises(DomainValidationError):
        UserName("   ")


def test_ids_must_be_uuids():
    with pytest.raises(DomainValidationError):
        ConversationId("not-a-uuid")
    assert UserId(str(uuid4()))


def test_content_kind_parse():
    assert ContentKind.parse("Text") is ContentKind.TEXT
    assert ContentKind.GIF.is_media
    assert ContentKind.EMOJI.is_textual
    with pytest.raises(DomainValidationError):
        ContentKind.parse("video")


def test_group_requires_name():
    with pytest.raises(DomainValidationError):
        Conversation(id=ConversationId(str(uuid4())), is_group=True, name=" ")


def test_one_to_one_cannot_be_renamed():
    conversation = Conversation.create_one_to_one()
    with pytest.raises(InvalidOperationError):
        conversation.rename("team")
    with pytest.raises(InvalidOperationError):
        conversation.set_photo("/uploads/x.png")


def test_forward_copies_content_as_forwarded():
    original = Message.create(
        conversation_id=ConversationId(str(uuid4())),
        sender_id=UserId(str(uuid4())),
        content="hi",
        content_kind=ContentKind.TEXT,
    )
    target = ConversationId(str(uuid4()))
    forwarder = UserId(str(uuid4()))

    copy = original.forward_to(target, forwarder)

    assert copy.id != original.id
    assert copy.conversation_id == target
    assert copy.sender_id == forwarder
    assert copy.content == "hi"
    assert copy.status is MessageStatus.FORWARDED


def test_promote_comments_keeps_order_and_authors():
    parent_id = Message.create(
        conversation_id=ConversationId(str(uuid4())),
        sender_id=UserId(str(uuid4())),
        content="parent",
        content_kind=ContentKind.TEXT,
    ).id
    bob, carol = UserId(str(uuid4())), UserId(str(uuid4()))
    first = Comment.create(parent_id, bob, "first", ContentKind.TEXT)
    second = Comment.create(parent_id, carol, "second", ContentKind.EMOJI)
    second.created_at = first.created_at + timedelta(seconds=1)
    conversation_id = ConversationId(str(uuid4()))

    promoted = promote_comments([second, first], conversation_id)

    assert [m.content for m in promoted] == ["first", "second"]
    assert [m.sender_id for m in promoted] == [bob, carol]
    assert all(m.status is MessageStatus.COMMENT_CONVERTED for m in promoted)
    assert all(m.conversation_id == conversation_id for m in promoted)
    assert promoted[0].created_at < promoted[1].created_at
    assert promoted[0].created_at <= datetime.now(timezone.utc)
