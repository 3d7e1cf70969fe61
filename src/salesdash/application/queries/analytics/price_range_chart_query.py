"""Price-range histogram (bar chart) for a month."""

from __future__ import annotations

import asyncio

from salesdash.application.dtos.analytics import PriceRangeChartResult
from salesdash.domain.catalog import (
    PRICE_BUCKETS,
    Month,
    TransactionCatalog,
    TransactionFilter,
)


class PriceRangeChartQuery:
    """Count a month's records in each of the fixed price buckets."""

    def __init__(self, catalog: TransactionCatalog):
        self._catalog = catalog

    @classmethod
    def from_catalog(cls, catalog: TransactionCatalog) -> PriceRangeChartQuery:
        return cls(catalog=catalog)

    async def execute(self, month: Month) -> PriceRangeChartResult:
        month_filter = TransactionFilter.build(month=month)

        # One count per bucket, no ordering between them
        counts = await asyncio.gather(
            *(
                self._catalog.count(
                    month_filter.with_price_range(bucket.to_price_range()),
                )
                for bucket in PRICE_BUCKETS
            ),
        )

        return PriceRangeChartResult(
            month=month.index,
            price_range_counts={
                bucket.label: count
                for bucket, count in zip(PRICE_BUCKETS, counts, strict=True)
            },
        )
