"""Catalog repository interfaces."""

from salesdash.domain.catalog.repositories.transaction_catalog import (
    CategoryCountRow,
    TransactionCatalog,
)

__all__ = ["CategoryCountRow", "TransactionCatalog"]
