"""
Conversation engine.

Messages move forward only through sent -> delivered -> read:
- delivered: set when the receiver fetches the conversation
- read: set when the receiver marks the conversation as read
The sender never changes a message's status.
"""

import logging
from datetime import UTC, datetime

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session, selectinload

from jobnest.db import Job, Message, User
from jobnest.errors import ForbiddenError, NotFoundError, ValidationError
from jobnest.services.common import get_or_raise

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 5000


def send(db: Session, sender_id: int, receiver_id: int, body: str, job_id: int | None = None) -> Message:
    """Store a new message in the sent state."""
    if body is None or not body.strip():
        raise ValidationError("Message is required")
    if len(body) > MAX_MESSAGE_LENGTH:
        raise ValidationError(f"Message cannot exceed {MAX_MESSAGE_LENGTH} characters")
    get_or_raise(db, User, receiver_id, "Receiver")
    if job_id is not None:
        get_or_raise(db, Job, job_id, "Job")

    message = Message(
        sender_id=sender_id,
        receiver_id=receiver_id,
        message=body,
        job_id=job_id,
        status="sent",
        timestamp=datetime.now(UTC),
    )
    db.add(message)
    db.commit()
    db.refresh(message)

    logger.info(f"Message {message.id} sent from {sender_id} to {receiver_id}")
    return message


def _between(caller_id: int, other_id: int, job_id: int | None):
    criteria = or_(
        and_(Message.sender_id == caller_id, Message.receiver_id == other_id),
        and_(Message.sender_id == other_id, Message.receiver_id == caller_id),
    )
    if job_id is not None:
        criteria = and_(criteria, Message.job_id == job_id)
    return criteria


def _mark_delivered(db: Session, caller_id: int, other_id: int, job_id: int | None) -> int:
    """Move messages addressed to the caller from sent to delivered.

    The status guard lives in the UPDATE itself, so concurrent fetches of the
    same conversation never touch a message already past sent.
    """
    query = db.query(Message).filter(
        Message.sender_id == other_id,
        Message.receiver_id == caller_id,
        Message.status == "sent",
    )
    if job_id is not None:
        query = query.filter(Message.job_id == job_id)
    return query.update({Message.status: "delivered"}, synchronize_session=False)


def get_conversation(db: Session, caller_id: int, other_id: int, job_id: int | None = None) -> list[Message]:
    """Messages between two users, oldest first, as seen after delivery."""
    delivered = _mark_delivered(db, caller_id, other_id, job_id)
    db.commit()
    if delivered:
        logger.info(f"Delivered {delivered} message(s) from {other_id} to {caller_id}")

    return (
        db.query(Message)
        .filter(_between(caller_id, other_id, job_id))
        .order_by(Message.timestamp.asc(), Message.id.asc())
        .all()
    )


def mark_read(db: Session, caller_id: int, other_id: int, job_id: int | None = None) -> int:
    """Mark everything other_id sent to the caller as read. Returns rows changed."""
    query = db.query(Message).filter(
        Message.sender_id == other_id,
        Message.receiver_id == caller_id,
        Message.status != "read",
    )
    if job_id is not None:
        query = query.filter(Message.job_id == job_id)

    updated = query.update({Message.status: "read"}, synchronize_session=False)
    db.commit()

    if updated:
        logger.info(f"Marked {updated} message(s) from {other_id} to {caller_id} as read")
    return updated


def delete_message(db: Session, caller_id: int, message_id: int) -> None:
    """Hard-delete a message. Only its sender or receiver may do this."""
    message = get_or_raise(db, Message, message_id, "Message")
    if caller_id not in (message.sender_id, message.receiver_id):
        logger.warning(f"User {caller_id} denied deleting message {message_id}")
        raise ForbiddenError("Not authorized to delete this message")

    db.delete(message)
    db.commit()


def list_conversations(db: Session, caller_id: int) -> list[dict]:
    """One entry per (counterpart, job) with the latest message and unread count."""
    messages = (
        db.query(Message)
        .options(selectinload(Message.sender), selectinload(Message.receiver))
        .filter(or_(Message.sender_id == caller_id, Message.receiver_id == caller_id))
        .order_by(Message.timestamp.desc(), Message.id.desc())
        .all()
    )

    conversations: dict[tuple[int, int | None], dict] = {}
    for m in messages:
        other = m.receiver if m.sender_id == caller_id else m.sender
        key = (other.id, m.job_id)
        if key not in conversations:
            conversations[key] = {
                "user_id": other.id,
                "user_name": other.name,
                "job_id": m.job_id,
                "last_message": m,
                "unread_count": 0,
            }
        if m.receiver_id == caller_id and m.status != "read":
            conversations[key]["unread_count"] += 1

    return list(conversations.values())
