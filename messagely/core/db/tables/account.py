from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from messagely.core.db.tables.base import Base
from datetime import datetime, timezone


class Account(Base):
    """
    A registered user.

    - username: Unique, immutable identifier
    - password_hash: Bcrypt hash, only ever replaced by a password reset
    - phone: E.164 number recovery codes are sent to
    - last_login_at: Bumped on every successful login
    """
    __tablename__ = "account"

    username: Mapped[str] = mapped_column(String(64), primary_key=True)
    password_hash: Mapped[str] = mapped_column(String(256))
    first_name: Mapped[str] = mapped_column(String(128))
    last_name: Mapped[str] = mapped_column(String(128))
    phone: Mapped[str] = mapped_column(String(32))
    joined_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc)
    )
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=lambda: datetime.now(timezone.utc)
    )
