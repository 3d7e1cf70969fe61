"""SQLAlchemy models."""

from salesdash.infrastructure.persistence.sqlalchemy.models.base import Base
from salesdash.infrastructure.persistence.sqlalchemy.models.product_transaction_model import (  # NOQA: E501
    ProductTransactionModel,
)

__all__ = ["Base", "ProductTransactionModel"]
