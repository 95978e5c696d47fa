"""User commands."""

from .login import LoginOrCreateCommand, LoginOrCreateHandler, LoginResult
from .rename_user import RenameUserCommand, RenameUserHandler
from .set_user_photo import SetUserPhotoCommand, SetUserPhotoHandler

__all__ = [
    "LoginOrCreateCommand",
    "LoginOrCreateHandler",
    "LoginResult",
    "RenameUserCommand",
    "RenameUserHandler",
    "SetUserPhotoCommand",
    "SetUserPhotoHandler",
]
