"""SQLAlchemy model for product transactions."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from salesdash.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)


class ProductTransactionModel(Base, CreatedAtMixin):
    """Database model for seeded product transactions."""

    __tablename__ = "product_transactions"

    __table_args__ = (
        Index("ix_product_transactions_date_of_sale", "date_of_sale"),
        Index("ix_product_transactions_category", "category"),
        Index("ix_product_transactions_sold", "sold"),
    )

    # Surrogate key; the dataset id repeats when the catalog is reseeded
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    source_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Identifier from the seed dataset",
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    image: Mapped[str] = mapped_column(Text, nullable=False, default="")
    sold: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    date_of_sale: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Stored in UTC; month filters read the UTC month",
    )

    def __repr__(self) -> str:
        return (
            f"<ProductTransactionModel(id={self.id}, source_id={self.source_id}, "
            f"title={self.title[:50]}, sold={self.sold})>"
        )
