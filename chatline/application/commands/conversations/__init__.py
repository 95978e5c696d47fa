"""Conversation and group commands."""

from .create_one_to_one import CreateOneToOneCommand, CreateOneToOneHandler
from .create_group import CreateGroupCommand, CreateGroupHandler
from .add_members import AddMembersCommand, AddMembersHandler
from .leave_group import LeaveGroupCommand, LeaveGroupHandler, LeaveGroupResult
from .rename_group import RenameGroupCommand, RenameGroupHandler
from .set_group_photo import SetGroupPhotoCommand, SetGroupPhotoHandler

__all__ = [
    "CreateOneToOneCommand",
    "CreateOneToOneHandler",
    "CreateGroupCommand",
    "CreateGroupHandler",
    "AddMembersCommand",
    "AddMembersHandler",
    "LeaveGroupCommand",
    "LeaveGroupHandler",
    "LeaveGroupResult",
    "RenameGroupCommand",
    "RenameGroupHandler",
    "SetGroupPhotoCommand",
    "SetGroupPhotoHandler",
]
