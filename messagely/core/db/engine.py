from pathlib import Path
from sqlalchemy import create_engine, Engine
from sqlalchemy.pool import StaticPool

from messagely.core.db.tables.base import Base
from messagely.core.db.tables.account import Account  # noqa: F401
from messagely.core.db.tables.recovery_code import RecoveryCode  # noqa: F401
from messagely.core.db.tables.message import Message  # noqa: F401


def build_engine(database_url: str) -> Engine:
    """
    Create the SQLAlchemy engine for ``database_url``.

    SQLite gets a single shared connection when in-memory, and a data
    directory for file databases. Other backends get a connection pool.
    """
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        else:
            db_path = database_url.split(":///", 1)[-1]
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    else:
        options = {
            "pool_size": 10,
            "max_overflow": 20,
            "pool_recycle": 3600,
        }

    return create_engine(database_url, echo=False, pool_pre_ping=True, **options)


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(engine)
