"""Messaging endpoints (poll-based)."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from jobnest.api.deps import get_current_user
from jobnest.api.limiter import limiter
from jobnest.api.schemas import (
    ConversationListResponse,
    ConversationSummary,
    MarkReadRequest,
    MarkReadResponse,
    MessageCreate,
    MessageResponse,
)
from jobnest.config import settings
from jobnest.db import User, get_db
from jobnest.services import messages

router = APIRouter()


@router.post("", response_model=MessageResponse, status_code=201)
@limiter.limit(settings.message_rate_limit)
def send_message(
    request: Request,
    data: MessageCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Send a message, optionally about a job."""
    message = messages.send(db, current_user.id, data.receiver_id, data.message, data.job_id)
    return MessageResponse.model_validate(message)


@router.get("", response_model=ConversationListResponse)
def list_conversations(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List the caller's conversations with unread counts."""
    return ConversationListResponse(
        conversations=[
            ConversationSummary(
                user_id=c["user_id"],
                user_name=c["user_name"],
                job_id=c["job_id"],
                last_message=MessageResponse.model_validate(c["last_message"]),
                unread_count=c["unread_count"],
            )
            for c in messages.list_conversations(db, current_user.id)
        ]
    )


@router.get("/{user_id}", response_model=list[MessageResponse])
def get_messages(
    user_id: int,
    job_id: int | None = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get the conversation with another user. Marks incoming messages delivered."""
    return [MessageResponse.model_validate(m) for m in messages.get_conversation(db, current_user.id, user_id, job_id)]


@router.put("/read/{user_id}", response_model=MarkReadResponse)
def mark_as_read(
    user_id: int,
    data: MarkReadRequest | None = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Mark everything the other user sent the caller as read."""
    job_id = data.job_id if data else None
    updated = messages.mark_read(db, current_user.id, user_id, job_id)
    return MarkReadResponse(success=True, updated=updated)


@router.delete("/{message_id}")
def delete_message(
    message_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a message the caller sent or received."""
    messages.delete_message(db, current_user.id, message_id)
    return {"success": True, "message": "Message deleted"}
