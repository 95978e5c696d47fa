"""
Conversations API Router - Reading conversations and exchanging messages.

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository → Database
                                   ↓
  HTTP Response ← Router ← DTO ← Result
"""

from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Body, Depends, File, Form, UploadFile, status
from pydantic import BaseModel

from chatline.application.commands.conversations import (
    SetGroupPhotoCommand,
    SetGroupPhotoHandler,
)
from chatline.application.commands.messages import (
    DeleteMessageCommand,
    DeleteMessageHandler,
    ForwardMessageCommand,
    ForwardMessageHandler,
    SendMessageCommand,
    SendMessageHandler,
)
from chatline.application.common.payload import Payload, effective_photo
from chatline.application.dto import ConversationDTO, MessageDTO, UserDTO
from chatline.application.queries.conversations import (
    GetConversationHandler,
    GetConversationQuery,
)
from chatline.domain.exceptions import DomainValidationError
from chatline.domain.value_objects import ConversationId, MessageId
from chatline.presentation.dependencies.auth import AuthUser, get_current_user
from chatline.presentation.dependencies.uploads import to_media_upload


# ==================== REQUEST/RESPONSE MODELS ====================


class ForwardRequest(BaseModel):
    """Only used when the target is the by-name marker."""

    target_username: Optional[str] = None


class DeleteMessageResponse(BaseModel):
    message: str
    promoted_comments: int


class GroupPhotoResponse(BaseModel):
    id: str
    photo: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/conversations", tags=["conversations"])


# ==================== ENDPOINTS ====================


@router.get("/{c_id}", response_model=ConversationDTO)
@inject
async def get_conversation(
    c_id: str,
    handler: FromDishka[GetConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Conversation header and all messages, oldest first."""
    detail = await handler.execute(
        GetConversationQuery(
            conversation_id=ConversationId(c_id), requester_id=current_user.id
        )
    )
    return ConversationDTO(
        id=detail.conversation.id.value,
        is_group=detail.conversation.is_group,
        name=detail.name,
        photo=detail.photo,
        created_at=detail.conversation.created_at,
        members=[UserDTO.from_entity(member) for member in detail.members],
        messages=[
            MessageDTO.from_entity(
                view.message,
                sender_name=view.sender_name,
                sender_photo=view.sender_photo,
                reply_content=view.reply_content,
                reply_sender_name=view.reply_sender_name,
            )
            for view in detail.messages
        ],
    )


@router.post(
    "/{c_id}/messages",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    c_id: str,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
    content: Optional[str] = Form(default=None),
    content_type: Optional[str] = Form(default=None),
    reply_to: Optional[str] = Form(default=None),
    file: Optional[UploadFile] = File(default=None),
):
    """
    Send a message.

    Request: form data with content + content_type (text or emoji), or a
    file (jpg/jpeg/png/gif). Optional reply_to is a message id.
    """
    result = await handler.execute(
        SendMessageCommand(
            conversation_id=ConversationId(c_id),
            sender_id=current_user.id,
            payload=Payload(
                content=content,
                content_type=content_type,
                upload=to_media_upload(file),
            ),
            reply_to=reply_to,
        )
    )
    return MessageDTO.from_entity(
        result.message,
        sender_name=result.sender.name.value,
        sender_photo=effective_photo(result.sender.photo),
    )


@router.delete("/{c_id}/messages/{m_id}", response_model=DeleteMessageResponse)
@inject
async def delete_message(
    c_id: str,
    m_id: str,
    handler: FromDishka[DeleteMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(
        DeleteMessageCommand(
            conversation_id=ConversationId(c_id),
            message_id=MessageId(m_id),
            requester_id=current_user.id,
        )
    )
    return DeleteMessageResponse(
        message="Message deleted successfully, comments converted to normal messages",
        promoted_comments=result.promoted_comments,
    )


@router.post(
    "/{c_id}/messages/{m_id}/forward/{target}",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def forward_message(
    c_id: str,
    m_id: str,
    target: str,
    handler: FromDishka[ForwardMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
    request: Optional[ForwardRequest] = Body(default=None),
):
    """`target` is a conversation id, or `new` with {"target_username": ...}."""
    forwarded = await handler.execute(
        ForwardMessageCommand(
            source_conversation_id=ConversationId(c_id),
            message_id=MessageId(m_id),
            requester_id=current_user.id,
            target=target,
            target_name=request.target_username if request else None,
        )
    )
    return MessageDTO.from_entity(forwarded, sender_name=current_user.name.value)


@router.put("/{c_id}/set-group-photo", response_model=GroupPhotoResponse)
@inject
async def set_group_photo(
    c_id: str,
    handler: FromDishka[SetGroupPhotoHandler],
    current_user: AuthUser = Depends(get_current_user),
    file: UploadFile = File(...),
):
    upload = to_media_upload(file)
    if upload is None:
        raise DomainValidationError("A photo file is required")
    conversation = await handler.execute(
        SetGroupPhotoCommand(
            conversation_id=ConversationId(c_id),
            requester_id=current_user.id,
            upload=upload,
        )
    )
    return GroupPhotoResponse(
        id=conversation.id.value, photo=effective_photo(conversation.photo)
    )
