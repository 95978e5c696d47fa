"""
Session API Router - Login by name.

POST /session {"username": "alice"} → {"user": {...}, "token": "<user id>"}
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, status
from pydantic import BaseModel

from chatline.application.commands.users import LoginOrCreateCommand, LoginOrCreateHandler
from chatline.application.dto import UserDTO
from chatline.domain.value_objects import UserName


class LoginRequest(BaseModel):
    username: str


class LoginResponse(BaseModel):
    user: UserDTO
    token: str
    created: bool


router = APIRouter(tags=["session"])


@router.post("/session", response_model=LoginResponse, status_code=status.HTTP_200_OK)
@inject
async def login(
    request: LoginRequest,
    handler: FromDishka[LoginOrCreateHandler],
):
    """Log in, creating the user on first use. The token is the user id."""
    result = await handler.execute(LoginOrCreateCommand(name=UserName(request.username)))
    return LoginResponse(
        user=UserDTO.from_entity(result.user),
        token=result.user.id.value,
        created=result.created,
    )
