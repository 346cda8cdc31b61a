"""
Credential store: persistence for Account rows.
"""
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from messagely.core.db.tables.account import Account
from messagely.core.errors import ConflictError, NotFoundError
from messagely.core.logger import get_logger

logger = get_logger(__name__)


def find_by_username(session: Session, username: str) -> Account | None:
    return session.execute(
        select(Account).where(Account.username == username)
    ).scalar()


def get_account(session: Session, username: str) -> Account:
    account = find_by_username(session, username)
    if not account:
        raise NotFoundError(f"{username} is not a valid username")
    return account


def list_accounts(session: Session) -> list[Account]:
    return list(
        session.execute(select(Account).order_by(Account.username)).scalars().all()
    )


def register(
    session: Session,
    username: str,
    password_hash: str,
    first_name: str,
    last_name: str,
    phone: str,
) -> Account:
    """
    Insert a new account with joined_at and last_login_at set to now.

    Raises ConflictError if the username is taken.
    """
    if find_by_username(session, username):
        raise ConflictError("Username already exists")

    now = datetime.now(timezone.utc)
    account = Account(
        username=username,
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        joined_at=now,
        last_login_at=now,
    )

    try:
        session.add(account)
        session.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same name
        session.rollback()
        logger.warning(f"Integrity error registering username: {username}")
        raise ConflictError("Username already exists")

    session.refresh(account)
    return account


def touch_login(session: Session, username: str) -> None:
    result = session.execute(
        update(Account)
        .where(Account.username == username)
        .values(last_login_at=datetime.now(timezone.utc))
    )
    if result.rowcount == 0:
        session.rollback()
        raise NotFoundError(f"{username} is not a valid username")
    session.commit()


def set_password_hash(session: Session, username: str, new_hash: str) -> None:
    result = session.execute(
        update(Account)
        .where(Account.username == username)
        .values(password_hash=new_hash)
    )
    if result.rowcount == 0:
        session.rollback()
        raise NotFoundError(f"{username} is not a valid username")
    session.commit()
