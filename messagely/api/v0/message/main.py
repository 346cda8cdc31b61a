from sqlalchemy.orm import Session
from fastapi import APIRouter, Depends, status

from messagely.core import messages
from messagely.core.db.session import get_current_user, get_db
from messagely.core.errors import ForbiddenError
from messagely.core.logger import get_logger
from messagely.api.v0.message.models import (
    MessageCreate,
    MessageCreatedResponse,
    MessageDetailResponse,
    MessageReadResponse,
)

router = APIRouter(prefix="/messages")
logger = get_logger(__name__)


@router.get("/{message_id}", response_model=MessageDetailResponse)
def get_message(
    message_id: int,
    current_user: str = Depends(get_current_user),
    session: Session = Depends(get_db),
):
    """Get a message (sender or recipient only)"""
    message = messages.get(session, message_id)

    if current_user not in (message.from_username, message.to_username):
        raise ForbiddenError("Cannot read this message")

    return {"message": message}


@router.post(
    "/", response_model=MessageCreatedResponse, status_code=status.HTTP_201_CREATED
)
def create_message(
    message_data: MessageCreate,
    current_user: str = Depends(get_current_user),
    session: Session = Depends(get_db),
):
    message = messages.create(
        session, current_user, message_data.to_username, message_data.body
    )
    logger.info(f"Message {message.id} sent by {current_user} to {message.to_username}")
    return {"message": message}


@router.post("/{message_id}/read", response_model=MessageReadResponse)
def mark_message_read(
    message_id: int,
    current_user: str = Depends(get_current_user),
    session: Session = Depends(get_db),
):
    """Mark a message as read (recipient only)"""
    message = messages.get(session, message_id)

    if current_user != message.to_username:
        raise ForbiddenError("Only the recipient can mark a message as read")

    return {"message": messages.mark_read(session, message_id)}
