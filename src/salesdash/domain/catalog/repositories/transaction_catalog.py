"""Transaction catalog interface.

Defines the contract for the store holding product transaction records.
Every read takes a TransactionFilter; implementations must treat independent
calls as safe to run concurrently.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from salesdash.domain.catalog.entities import ProductTransaction
from salesdash.domain.catalog.value_objects import TransactionFilter


@dataclass(frozen=True)
class CategoryCountRow:
    """Number of matching records for one category."""

    category: str
    count: int


class TransactionCatalog(ABC):
    """Repository interface for product transaction records."""

    @abstractmethod
    async def find(
        self,
        transaction_filter: TransactionFilter,
        *,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[ProductTransaction]:
        """Return matching records in catalog order, skipping ``offset``."""

    @abstractmethod
    async def count(self, transaction_filter: TransactionFilter) -> int:
        """Count matching records."""

    @abstractmethod
    async def sum_price(self, transaction_filter: TransactionFilter) -> Decimal:
        """Sum the price of matching records (0 when nothing matches)."""

    @abstractmethod
    async def count_by_category(
        self,
        transaction_filter: TransactionFilter,
    ) -> list[CategoryCountRow]:
        """Group matching records by category, ordered by category name."""

    @abstractmethod
    async def insert_many(self, records: Sequence[ProductTransaction]) -> int:
        """Insert records and return how many were written."""
