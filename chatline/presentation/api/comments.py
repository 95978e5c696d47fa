"""
Comments API Router.

Endpoints:
- POST   /conversations/{c_id}/messages/{m_id}/comments
- DELETE /conversations/{c_id}/messages/{m_id}/comments/{comment_id}
- GET    /messages/{m_id}/comments
"""

from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from pydantic import BaseModel

from chatline.application.commands.comments import (
    AddCommentCommand,
    AddCommentHandler,
    RemoveCommentCommand,
    RemoveCommentHandler,
)
from chatline.application.common.payload import Payload
from chatline.application.dto import CommentDTO, MessageDTO
from chatline.application.queries.comments import ListCommentsHandler, ListCommentsQuery
from chatline.domain.value_objects import CommentId, ConversationId, MessageId
from chatline.presentation.dependencies.auth import AuthUser, get_current_user
from chatline.presentation.dependencies.uploads import to_media_upload


class AddCommentResponse(BaseModel):
    message: str
    comment: Optional[CommentDTO] = None
    # Present when the parent was deleted and the comment became a message
    converted_message: Optional[MessageDTO] = None


class RemoveCommentResponse(BaseModel):
    message: str


class ListCommentsResponse(BaseModel):
    comments: list[CommentDTO]


router = APIRouter(prefix="/conversations", tags=["comments"])
messages_router = APIRouter(prefix="/messages", tags=["comments"])


@router.post(
    "/{c_id}/messages/{m_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def comment_message(
    c_id: str,
    m_id: str,
    handler: FromDishka[AddCommentHandler],
    current_user: AuthUser = Depends(get_current_user),
    content: Optional[str] = Form(default=None),
    content_type: Optional[str] = Form(default=None),
    file: Optional[UploadFile] = File(default=None),
):
    result = await handler.execute(
        AddCommentCommand(
            conversation_id=ConversationId(c_id),
            message_id=MessageId(m_id),
            author_id=current_user.id,
            payload=Payload(
                content=content,
                content_type=content_type,
                upload=to_media_upload(file),
            ),
        )
    )
    if result.converted:
        return AddCommentResponse(
            message="Original message deleted. Comment added as normal message.",
            converted_message=MessageDTO.from_entity(
                result.message, sender_name=current_user.name.value
            ),
        )
    return AddCommentResponse(
        message="Comment added successfully",
        comment=CommentDTO.from_entity(
            result.comment, author_name=current_user.name.value
        ),
    )


@router.delete(
    "/{c_id}/messages/{m_id}/comments/{comment_id}",
    response_model=RemoveCommentResponse,
)
@inject
async def uncomment_message(
    c_id: str,
    m_id: str,
    comment_id: str,
    handler: FromDishka[RemoveCommentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await handler.execute(
        RemoveCommentCommand(
            comment_id=CommentId(comment_id),
            requester_id=current_user.id,
            conversation_id=ConversationId(c_id),
        )
    )
    return RemoveCommentResponse(message="Comment removed successfully")


@messages_router.get("/{m_id}/comments", response_model=ListCommentsResponse)
@inject
async def get_comments(
    m_id: str,
    handler: FromDishka[ListCommentsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    views = await handler.execute(
        ListCommentsQuery(message_id=MessageId(m_id), requester_id=current_user.id)
    )
    return ListCommentsResponse(
        comments=[
            CommentDTO.from_entity(view.comment, author_name=view.author_name)
            for view in views
        ]
    )
