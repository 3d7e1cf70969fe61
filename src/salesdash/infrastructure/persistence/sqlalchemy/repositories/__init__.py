"""SQLAlchemy repository implementations."""

from salesdash.infrastructure.persistence.sqlalchemy.repositories.transaction_catalog_sqlalchemy import (  # NOQA: E501
    SqlAlchemyTransactionCatalog,
)

__all__ = ["SqlAlchemyTransactionCatalog"]
