import asyncio
import io
from uuid import uuid4

import pytest

from chatline.application.commands.conversations import (
    AddMembersCommand,
    AddMembersHandler,
    CreateGroupCommand,
    CreateGroupHandler,
    CreateOneToOneCommand,
    CreateOneToOneHandler,
    LeaveGroupCommand,
    LeaveGroupHandler,
    RenameGroupCommand,
    RenameGroupHandler,
    SetGroupPhotoCommand,
    SetGroupPhotoHandler,
)
from chatline.application.commands.users import (
    LoginOrCreateCommand,
    LoginOrCreateHandler,
    RenameUserCommand,
    RenameUserHandler,
    SetUserPhotoCommand,
    SetUserPhotoHandler,
)
from chatline.application.queries.users import (
    ResolveIdentityHandler,
    ResolveIdentityQuery,
    SearchUserHandler,
    SearchUserQuery,
)
from chatline.domain.exceptions import (
    AccessDeniedError,
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
    InvalidOperationError,
    UnauthenticatedError,
)
from chatline.domain.ports.media_storage import MediaUpload
from chatline.domain.value_objects import UserName


def run(handler, command):
    return asyncio.run(handler.execute(command))


# ==================== USERS ====================


def test_login_is_idempotent(repos, ctx):
    handler = LoginOrCreateHandler(repos.users, ctx)

    first = run(handler, LoginOrCreateCommand(name=UserName("alice")))
    second = run(handler, LoginOrCreateCommand(name=UserName(" alice ")))

    assert first.created is True
    assert second.created is False
    assert first.user.id == second.user.id


def test_resolve_identity(repos, make_user):
    alice = make_user("alice")
    handler = ResolveIdentityHandler(repos.users)

    assert run(handler, ResolveIdentityQuery(token=alice.id.value)).id == alice.id
    with pytest.raises(UnauthenticatedError):
        run(handler, ResolveIdentityQuery(token=None))
    with pytest.raises(UnauthenticatedError):
        run(handler, ResolveIdentityQuery(token="garbage"))
    with pytest.raises(EntityNotFoundError):
        run(handler, ResolveIdentityQuery(token=str(uuid4())))


def test_rename_user_cascades_to_one_to_one(repos, ctx, make_user):
    alice, bob = make_user("alice"), make_user("bob")
    pair = run(
        CreateOneToOneHandler(repos.conversations, repos.users, ctx),
        CreateOneToOneCommand(user_a=alice.id, user_b=bob.id),
    )
    group = run(
        CreateGroupHandler(repos.conversations, repos.users, None, ctx),
        CreateGroupCommand(creator_id=bob.id, name="team", member_names=["alice"]),
    )

    renamed = run(
        RenameUserHandler(repos.users, ctx),
        RenameUserCommand(user_id=bob.id, new_name=UserName("robert")),
    )

    assert renamed.name == UserName("robert")
    assert asyncio.run(repos.users.get_by_name(UserName("bob"))) is None
    assert asyncio.run(repos.conversations.get_by_id(pair.id)).name == "robert"
    assert asyncio.run(repos.conversations.get_by_id(group.id)).name == "team"


def test_rename_user_to_own_name_is_noop_and_taken_name_conflicts(repos, ctx, make_user):
    alice = make_user("alice")
    make_user("bob")
    handler = RenameUserHandler(repos.users, ctx)

    assert run(handler, RenameUserCommand(user_id=alice.id, new_name=UserName("alice"))).id == alice.id
    with pytest.raises(ConflictError):
        run(handler, RenameUserCommand(user_id=alice.id, new_name=UserName("bob")))


def test_search_reports_existing_pair(repos, ctx, make_user):
    alice, bob = make_user("alice"), make_user("bob")
    handler = SearchUserHandler(repos.users, repos.conversations)

    assert run(handler, SearchUserQuery(requester_id=alice.id, name="bob")).conversation_id is None

    pair = run(
        CreateOneToOneHandler(repos.conversations, repos.users, ctx),
        CreateOneToOneCommand(user_a=alice.id, user_b=bob.id),
    )
    result = run(handler, SearchUserQuery(requester_id=alice.id, name="bob"))
    assert result.conversation_id == pair.id
    with pytest.raises(EntityNotFoundError):
        run(handler, SearchUserQuery(requester_id=alice.id, name="nobody"))


# ==================== CONVERSATIONS ====================


def test_one_to_one_pair_is_unique(repos, ctx, make_user):
    alice, bob = make_user("alice"), make_user("bob")
    handler = CreateOneToOneHandler(repos.conversations, repos.users, ctx)
    run(handler, CreateOneToOneCommand(user_a=alice.id, user_b=bob.id))

    with pytest.raises(ConflictError):
        run(handler, CreateOneToOneCommand(user_a=bob.id, user_b=alice.id))
    with pytest.raises(DomainValidationError):
        run(handler, CreateOneToOneCommand(user_a=alice.id, user_b=alice.id))


def test_create_group_resolves_all_members_first(repos, ctx, make_user):
    alice = make_user("alice")
    make_user("bob")
    handler = CreateGroupHandler(repos.conversations, repos.users, None, ctx)

    with pytest.raises(EntityNotFoundError):
        run(handler, CreateGroupCommand(creator_id=alice.id, name="team", member_names=["bob", "ghost"]))
    assert asyncio.run(repos.conversations.find_group_by_name("team")) is None

    group = run(
        handler,
        CreateGroupCommand(creator_id=alice.id, name="team", member_names=["bob", "bob", "alice"]),
    )
    assert asyncio.run(repos.conversations.count_members(group.id)) == 2

    with pytest.raises(ConflictError):
        run(handler, CreateGroupCommand(creator_id=alice.id, name="team"))
    with pytest.raises(DomainValidationError):
        run(handler, CreateGroupCommand(creator_id=alice.id, name="   "))


def test_add_members_skips_existing(repos, ctx, guard, make_user):
    alice, bob, carol = make_user("alice"), make_user("bob"), make_user("carol")
    group = run(
        CreateGroupHandler(repos.conversations, repos.users, None, ctx),
        CreateGroupCommand(creator_id=alice.id, name="team", member_names=["bob"]),
    )
    handler = AddMembersHandler(repos.conversations, repos.users, guard, ctx)

    added = run(
        handler,
        AddMembersCommand(conversation_id=group.id, requester_id=alice.id, usernames=["bob", "carol"]),
    )

    assert [u.id for u in added] == [carol.id]
    assert asyncio.run(repos.conversations.count_members(group.id)) == 3
    outsider = make_user("dave")
    with pytest.raises(AccessDeniedError):
        run(
            handler,
            AddMembersCommand(conversation_id=group.id, requester_id=outsider.id, usernames=["dave"]),
        )
    assert bob.id in asyncio.run(repos.conversations.list_member_ids(group.id))


def test_group_only_operations_reject_one_to_one(repos, ctx, guard, make_user):
    alice, bob = make_user("alice"), make_user("bob")
    pair = run(
        CreateOneToOneHandler(repos.conversations, repos.users, ctx),
        CreateOneToOneCommand(user_a=alice.id, user_b=bob.id),
    )

    with pytest.raises(InvalidOperationError):
        run(
            LeaveGroupHandler(repos.conversations, guard, ctx),
            LeaveGroupCommand(conversation_id=pair.id, user_id=alice.id),
        )
    with pytest.raises(InvalidOperationError):
        run(
            RenameGroupHandler(repos.conversations, guard, ctx),
            RenameGroupCommand(conversation_id=pair.id, requester_id=alice.id, new_name="x"),
        )


def test_last_member_leaving_deletes_group(repos, ctx, guard, make_user):
    alice, bob = make_user("alice"), make_user("bob")
    group = run(
        CreateGroupHandler(repos.conversations, repos.users, None, ctx),
        CreateGroupCommand(creator_id=alice.id, name="team", member_names=["bob"]),
    )
    handler = LeaveGroupHandler(repos.conversations, guard, ctx)

    first = run(handler, LeaveGroupCommand(conversation_id=group.id, user_id=bob.id))
    assert (first.remaining_members, first.group_deleted) == (1, False)
    with pytest.raises(AccessDeniedError):
        run(handler, LeaveGroupCommand(conversation_id=group.id, user_id=bob.id))

    last = run(handler, LeaveGroupCommand(conversation_id=group.id, user_id=alice.id))
    assert last.group_deleted is True
    assert asyncio.run(repos.conversations.get_by_id(group.id)) is None


def test_rename_group(repos, ctx, guard, make_user):
    alice = make_user("alice")
    create = CreateGroupHandler(repos.conversations, repos.users, None, ctx)
    team = run(create, CreateGroupCommand(creator_id=alice.id, name="team"))
    run(create, CreateGroupCommand(creator_id=alice.id, name="other"))
    handler = RenameGroupHandler(repos.conversations, guard, ctx)

    assert run(handler, RenameGroupCommand(conversation_id=team.id, requester_id=alice.id, new_name="team")).name == "team"
    with pytest.raises(ConflictError):
        run(handler, RenameGroupCommand(conversation_id=team.id, requester_id=alice.id, new_name="other"))

    renamed = run(handler, RenameGroupCommand(conversation_id=team.id, requester_id=alice.id, new_name="crew"))
    assert renamed.name == "crew"
    assert asyncio.run(repos.conversations.find_group_by_name("crew")).id == team.id


def test_guard_predicates(repos, ctx, guard, make_user):
    alice, bob = make_user("alice"), make_user("bob")
    pair = run(
        CreateOneToOneHandler(repos.conversations, repos.users, ctx),
        CreateOneToOneCommand(user_a=alice.id, user_b=bob.id),
    )
    carol = make_user("carol")

    assert asyncio.run(guard.is_member(alice.id, pair.id)) is True
    assert asyncio.run(guard.is_member(carol.id, pair.id)) is False
    assert asyncio.run(guard.is_conversation_group(pair.id)) is False


# ==================== LOOKUPS AND PHOTOS ====================

TOO_LONG = "x" * 26


def gif_upload():
    return MediaUpload(stream=io.BytesIO(b"GIF89a"), filename="party.gif")


def test_overlong_member_names_are_not_found(repos, ctx, guard, make_user):
    alice = make_user("alice")
    create = CreateGroupHandler(repos.conversations, repos.users, None, ctx)

    with pytest.raises(EntityNotFoundError):
        run(create, CreateGroupCommand(creator_id=alice.id, name="team", member_names=[TOO_LONG]))

    group = run(create, CreateGroupCommand(creator_id=alice.id, name="team"))
    with pytest.raises(EntityNotFoundError):
        run(
            AddMembersHandler(repos.conversations, repos.users, guard, ctx),
            AddMembersCommand(conversation_id=group.id, requester_id=alice.id, usernames=[TOO_LONG]),
        )
    with pytest.raises(EntityNotFoundError):
        run(
            SearchUserHandler(repos.users, repos.conversations),
            SearchUserQuery(requester_id=alice.id, name=TOO_LONG),
        )


def test_gif_photos_are_rejected_before_storing(
    repos, ctx, guard, media_storage, make_user, tmp_path
):
    alice = make_user("alice")
    create = CreateGroupHandler(repos.conversations, repos.users, media_storage, ctx)

    with pytest.raises(DomainValidationError):
        run(create, CreateGroupCommand(creator_id=alice.id, name="team", photo=gif_upload()))
    assert asyncio.run(repos.conversations.find_group_by_name("team")) is None

    group = run(create, CreateGroupCommand(creator_id=alice.id, name="team"))
    with pytest.raises(DomainValidationError):
        run(
            SetGroupPhotoHandler(repos.conversations, media_storage, guard, ctx),
            SetGroupPhotoCommand(conversation_id=group.id, requester_id=alice.id, upload=gif_upload()),
        )
    with pytest.raises(DomainValidationError):
        run(
            SetUserPhotoHandler(repos.users, media_storage, ctx),
            SetUserPhotoCommand(user_id=alice.id, upload=gif_upload()),
        )

    assert list(tmp_path.iterdir()) == []
    assert asyncio.run(repos.users.get_by_id(alice.id)).photo is None
