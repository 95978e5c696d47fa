"""
Groups API Router - Group creation and membership.

Endpoints:
- POST   /groups                  (form: group_name, usernames as JSON array, optional photo)
- POST   /groups/{c_id}/members   {"usernames": [...]}
- DELETE /groups/{c_id}/leave
- PUT    /groups/{c_id}/name      {"new_name": "..."}
"""

import json
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from pydantic import BaseModel

from chatline.application.commands.conversations import (
    AddMembersCommand,
    AddMembersHandler,
    CreateGroupCommand,
    CreateGroupHandler,
    LeaveGroupCommand,
    LeaveGroupHandler,
    RenameGroupCommand,
    RenameGroupHandler,
)
from chatline.application.common.payload import effective_photo
from chatline.application.dto import UserDTO
from chatline.domain.exceptions import DomainValidationError
from chatline.domain.value_objects import ConversationId
from chatline.presentation.dependencies.auth import AuthUser, get_current_user
from chatline.presentation.dependencies.uploads import to_media_upload


# ==================== REQUEST/RESPONSE MODELS ====================


class GroupResponse(BaseModel):
    id: str
    name: str
    photo: str


class AddMembersRequest(BaseModel):
    usernames: list[str]


class AddMembersResponse(BaseModel):
    message: str
    added_users: list[UserDTO]


class LeaveGroupResponse(BaseModel):
    message: str
    remaining_members: int
    group_deleted: bool


class RenameGroupRequest(BaseModel):
    new_name: str


router = APIRouter(prefix="/groups", tags=["groups"])


def _parse_usernames(raw: str) -> list[str]:
    if not raw:
        return []
    try:
        usernames = json.loads(raw)
    except json.JSONDecodeError:
        raise DomainValidationError("Invalid usernames format. Expected JSON array.")
    if not isinstance(usernames, list) or not all(isinstance(u, str) for u in usernames):
        raise DomainValidationError("Invalid usernames format. Expected JSON array.")
    return usernames


# ==================== ENDPOINTS ====================


@router.post("", response_model=GroupResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_group(
    handler: FromDishka[CreateGroupHandler],
    current_user: AuthUser = Depends(get_current_user),
    group_name: str = Form(...),
    usernames: str = Form(default=""),
    photo: Optional[UploadFile] = File(default=None),
):
    conversation = await handler.execute(
        CreateGroupCommand(
            creator_id=current_user.id,
            name=group_name,
            member_names=_parse_usernames(usernames),
            photo=to_media_upload(photo),
        )
    )
    return GroupResponse(
        id=conversation.id.value,
        name=conversation.name,
        photo=effective_photo(conversation.photo),
    )


@router.post("/{c_id}/members", response_model=AddMembersResponse)
@inject
async def add_to_group(
    c_id: str,
    request: AddMembersRequest,
    handler: FromDishka[AddMembersHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    if not request.usernames:
        raise DomainValidationError("Invalid input: at least one username is required")
    added = await handler.execute(
        AddMembersCommand(
            conversation_id=ConversationId(c_id),
            requester_id=current_user.id,
            usernames=request.usernames,
        )
    )
    return AddMembersResponse(
        message="Users added to group",
        added_users=[UserDTO.from_entity(user) for user in added],
    )


@router.delete("/{c_id}/leave", response_model=LeaveGroupResponse)
@inject
async def leave_group(
    c_id: str,
    handler: FromDishka[LeaveGroupHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(
        LeaveGroupCommand(conversation_id=ConversationId(c_id), user_id=current_user.id)
    )
    return LeaveGroupResponse(
        message="Group deleted" if result.group_deleted else "Left the group",
        remaining_members=result.remaining_members,
        group_deleted=result.group_deleted,
    )


@router.put("/{c_id}/name", response_model=GroupResponse)
@inject
async def set_group_name(
    c_id: str,
    request: RenameGroupRequest,
    handler: FromDishka[RenameGroupHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    conversation = await handler.execute(
        RenameGroupCommand(
            conversation_id=ConversationId(c_id),
            requester_id=current_user.id,
            new_name=request.new_name,
        )
    )
    return GroupResponse(
        id=conversation.id.value,
        name=conversation.name,
        photo=effective_photo(conversation.photo),
    )
