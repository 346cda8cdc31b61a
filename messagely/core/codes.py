"""
One-time recovery code ledger.

Every forgot-password request appends a RecoveryCode row. Only the newest
row for a username is ever compared against a supplied code, and a row
stops matching once it is marked used.
"""
import secrets
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from messagely.core.db.tables.recovery_code import RecoveryCode
from messagely.core.security import constant_time_compare

CODE_MIN = 100000
CODE_MAX = 999999


def new_code() -> str:
    """Uniformly random 6-digit code in [100000, 999999]."""
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


def latest(session: Session, username: str) -> RecoveryCode | None:
    return session.execute(
        select(RecoveryCode)
        .where(RecoveryCode.username == username)
        .order_by(RecoveryCode.created_at.desc(), RecoveryCode.id.desc())
        .limit(1)
    ).scalar()


def issue(session: Session, username: str) -> str:
    """Persist and return a fresh code. Earlier codes are left as they are."""
    code = new_code()
    session.add(
        RecoveryCode(
            code=code,
            username=username,
            created_at=datetime.now(timezone.utc),
            used=False,
        )
    )
    session.commit()
    return code


def verify(session: Session, username: str, code: str) -> bool:
    row = latest(session, username)
    if row is None or row.used:
        return False
    return constant_time_compare(row.code, code)


def consume(session: Session, username: str, code: str) -> None:
    """Mark the code used. Does nothing if it is unknown or already used."""
    session.execute(
        update(RecoveryCode)
        .where(
            RecoveryCode.username == username,
            RecoveryCode.code == code,
            RecoveryCode.used.is_(False),
        )
        .values(used=True)
    )
    session.commit()


def claim(session: Session, username: str, code: str) -> bool:
    """
    Verify and consume in one step.

    The UPDATE only matches while the row is still unused, so when several
    callers race with the same code exactly one of them gets a True.
    """
    row = latest(session, username)
    if row is None or row.used or not constant_time_compare(row.code, code):
        return False

    result = session.execute(
        update(RecoveryCode)
        .where(RecoveryCode.id == row.id, RecoveryCode.used.is_(False))
        .values(used=True)
        .execution_options(synchronize_session=False)
    )
    session.commit()
    return result.rowcount == 1
