"""Category distribution (pie chart) for a month."""

from __future__ import annotations

from salesdash.application.dtos.analytics import (
    CategoryCount,
    CategoryDistributionResult,
)
from salesdash.domain.catalog import Month, TransactionCatalog, TransactionFilter


class CategoryDistributionQuery:
    """Return how many of a month's records fall in each category.

    Sold and unsold records are both counted.
    """

    def __init__(self, catalog: TransactionCatalog):
        self._catalog = catalog

    @classmethod
    def from_catalog(cls, catalog: TransactionCatalog) -> CategoryDistributionQuery:
        return cls(catalog=catalog)

    async def execute(self, month: Month) -> CategoryDistributionResult:
        rows = await self._catalog.count_by_category(
            TransactionFilter.build(month=month),
        )
        return CategoryDistributionResult(
            month=month.index,
            items=[CategoryCount(category=row.category, count=row.count) for row in rows],
        )
