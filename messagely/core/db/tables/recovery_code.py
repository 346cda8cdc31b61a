from sqlalchemy import String, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from messagely.core.db.tables.base import Base
from datetime import datetime, timezone


class RecoveryCode(Base):
    """
    One-time password reset code sent by SMS.

    A row is written per forgot-password request and never overwritten.
    Only the newest row for a username can match, and only while unused.
    """
    __tablename__ = "recovery_code"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(6))
    username: Mapped[str] = mapped_column(
        String(64), ForeignKey("account.username"), index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc)
    )
    used: Mapped[bool] = mapped_column(Boolean, default=False)
