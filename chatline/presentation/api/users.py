"""
Users API Router - Profile, conversation list and first messages.

Endpoints:
- PUT  /users/me/username
- PUT  /users/me/photo                       (multipart: file)
- GET  /users/{user_id}
- GET  /users/{user_id}/conversations
- POST /users/{user_id}/conversations/first-message
- GET  /search/users?username=...
"""

from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from pydantic import BaseModel

from chatline.application.commands.messages import (
    SendFirstMessageCommand,
    SendFirstMessageHandler,
)
from chatline.application.commands.users import (
    RenameUserCommand,
    RenameUserHandler,
    SetUserPhotoCommand,
    SetUserPhotoHandler,
)
from chatline.application.common.payload import Payload
from chatline.application.dto import ConversationSummaryDTO, MessageDTO, UserDTO
from chatline.application.queries.conversations import (
    ListConversationsHandler,
    ListConversationsQuery,
)
from chatline.application.queries.users import (
    GetUserHandler,
    GetUserQuery,
    SearchUserHandler,
    SearchUserQuery,
)
from chatline.domain.exceptions import AccessDeniedError, DomainValidationError
from chatline.domain.value_objects import UserId, UserName
from chatline.presentation.dependencies.auth import AuthUser, get_current_user
from chatline.presentation.dependencies.uploads import to_media_upload


# ==================== REQUEST/RESPONSE MODELS ====================


class RenameRequest(BaseModel):
    newname: str


class ListConversationsResponse(BaseModel):
    conversations: list[ConversationSummaryDTO]


class FirstMessageResponse(BaseModel):
    c_id: str
    message: MessageDTO


class SearchUserResponse(BaseModel):
    user: UserDTO
    conversation_id: Optional[str] = None


# ==================== ROUTERS ====================

router = APIRouter(prefix="/users", tags=["users"])
search_router = APIRouter(prefix="/search", tags=["users"])


def _require_self(user_id: str, current_user: AuthUser) -> None:
    if user_id != current_user.id.value:
        raise AccessDeniedError("You can only act on your own account")


# ==================== ENDPOINTS ====================


@router.put("/me/username", response_model=UserDTO)
@inject
async def set_my_username(
    request: RenameRequest,
    handler: FromDishka[RenameUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(
        RenameUserCommand(user_id=current_user.id, new_name=UserName(request.newname))
    )
    return UserDTO.from_entity(user)


@router.put("/me/photo", response_model=UserDTO)
@inject
async def set_my_photo(
    handler: FromDishka[SetUserPhotoHandler],
    current_user: AuthUser = Depends(get_current_user),
    file: UploadFile = File(...),
):
    upload = to_media_upload(file)
    if upload is None:
        raise DomainValidationError("A photo file is required")
    user = await handler.execute(SetUserPhotoCommand(user_id=current_user.id, upload=upload))
    return UserDTO.from_entity(user)


@router.get("/{user_id}", response_model=UserDTO)
@inject
async def get_user(
    user_id: str,
    handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    user = await handler.execute(GetUserQuery(user_id=UserId(user_id)))
    return UserDTO.from_entity(user)


@router.get("/{user_id}/conversations", response_model=ListConversationsResponse)
@inject
async def get_my_conversations(
    user_id: str,
    handler: FromDishka[ListConversationsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Conversations of the current user, most recent activity first."""
    _require_self(user_id, current_user)
    summaries = await handler.execute(ListConversationsQuery(user_id=current_user.id))
    return ListConversationsResponse(
        conversations=[
            ConversationSummaryDTO(
                id=summary.id.value,
                is_group=summary.is_group,
                name=summary.name,
                photo=summary.photo,
                last_activity=summary.last_activity,
                member_count=summary.member_count,
                last_message=summary.last_message,
                last_message_type=(
                    summary.last_message_kind.value if summary.last_message_kind else None
                ),
            )
            for summary in summaries
        ]
    )


@router.post(
    "/{user_id}/conversations/first-message",
    response_model=FirstMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_first_message(
    user_id: str,
    handler: FromDishka[SendFirstMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
    recipient_username: str = Form(...),
    content: Optional[str] = Form(default=None),
    content_type: Optional[str] = Form(default=None),
    file: Optional[UploadFile] = File(default=None),
):
    """
    Open a one-on-one conversation with `recipient_username`.

    Request: form data with either content + content_type or a file.
    """
    _require_self(user_id, current_user)
    result = await handler.execute(
        SendFirstMessageCommand(
            sender_id=current_user.id,
            recipient_name=recipient_username,
            payload=Payload(
                content=content,
                content_type=content_type,
                upload=to_media_upload(file),
            ),
        )
    )
    return FirstMessageResponse(
        c_id=result.conversation.id.value,
        message=MessageDTO.from_entity(
            result.message, sender_name=current_user.name.value
        ),
    )


@search_router.get("/users", response_model=SearchUserResponse)
@inject
async def search_user(
    handler: FromDishka[SearchUserHandler],
    current_user: AuthUser = Depends(get_current_user),
    username: str = Query(...),
):
    result = await handler.execute(
        SearchUserQuery(requester_id=current_user.id, name=username)
    )
    return SearchUserResponse(
        user=UserDTO.from_entity(result.user),
        conversation_id=result.conversation_id.value if result.conversation_id else None,
    )
