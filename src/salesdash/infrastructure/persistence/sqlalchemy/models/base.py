"""SQLAlchemy base configuration."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from salesdash.domain.shared.time import utc_now


class Base(DeclarativeBase):
    """Base class for all database models."""


class CreatedAtMixin:
    """Mixin for the row insertion timestamp (utc_now)."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
