from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime, timezone

from messagely.core.db.tables.base import Base
from messagely.core.db.tables.account import Account


class Message(Base):
    """Direct message between two accounts"""

    __tablename__ = "message"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    from_username: Mapped[str] = mapped_column(
        String(64), ForeignKey("account.username"), index=True
    )
    to_username: Mapped[str] = mapped_column(
        String(64), ForeignKey("account.username"), index=True
    )
    body: Mapped[str] = mapped_column(String(4096))
    sent_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc)
    )
    read_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None
    )

    from_user: Mapped[Account] = relationship(
        Account, foreign_keys=[from_username], lazy="joined"
    )
    to_user: Mapped[Account] = relationship(
        Account, foreign_keys=[to_username], lazy="joined"
    )
