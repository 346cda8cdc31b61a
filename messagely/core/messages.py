"""
Message store: create, fetch and mark-read for direct messages.
"""
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from messagely.core.accounts import get_account
from messagely.core.db.tables.message import Message
from messagely.core.errors import NotFoundError


def get(session: Session, message_id: int) -> Message:
    message = session.execute(
        select(Message).where(Message.id == message_id)
    ).scalar()
    if not message:
        raise NotFoundError(f"No such message: {message_id}")
    return message


def create(session: Session, from_username: str, to_username: str, body: str) -> Message:
    get_account(session, to_username)

    message = Message(
        from_username=from_username,
        to_username=to_username,
        body=body,
    )
    session.add(message)
    session.commit()
    session.refresh(message)
    return message


def mark_read(session: Session, message_id: int) -> Message:
    message = get(session, message_id)
    message.read_at = datetime.now(timezone.utc)
    session.commit()
    session.refresh(message)
    return message


def list_from(session: Session, username: str) -> list[Message]:
    return list(
        session.execute(
            select(Message)
            .where(Message.from_username == username)
            .order_by(Message.sent_at.asc(), Message.id.asc())
        ).scalars().all()
    )


def list_to(session: Session, username: str) -> list[Message]:
    return list(
        session.execute(
            select(Message)
            .where(Message.to_username == username)
            .order_by(Message.sent_at.asc(), Message.id.asc())
        ).scalars().all()
    )
