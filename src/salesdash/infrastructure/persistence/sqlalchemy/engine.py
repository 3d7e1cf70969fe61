"""Engine and session factory construction."""

import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from salesdash.infrastructure.persistence.sqlalchemy.models import Base

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(url: str) -> None:
    parsed = make_url(url)
    if not parsed.drivername.startswith("sqlite"):
        return
    if parsed.database and parsed.database != ":memory:":
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)


def create_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given database URL.

    For file-based SQLite URLs the parent directory is created first.

    Parameters
    ----------
    url
        SQLAlchemy async URL, e.g. ``postgresql+asyncpg://...`` or
        ``sqlite+aiosqlite:///data/salesdash.db``
    echo
        Log every emitted SQL statement

    Returns
    -------
    AsyncEngine instance
    """
    _ensure_sqlite_directory(url)

    connect_args: dict = {}
    if make_url(url).drivername == "postgresql+asyncpg":
        # Month filters extract from the session time zone
        connect_args["server_settings"] = {"timezone": "UTC"}

    return create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Only missing tables are created; existing tables and rows are untouched.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date")

