"""Sales statistics for a month: sale amount, sold and unsold counts."""

from __future__ import annotations

import asyncio
import logging

from salesdash.application.dtos.analytics import SalesStatisticsResult
from salesdash.domain.catalog import Month, TransactionCatalog, TransactionFilter

logger = logging.getLogger(__name__)


class SalesStatisticsQuery:
    """Return total sale amount and sold/not-sold counts for a month."""

    def __init__(self, catalog: TransactionCatalog):
        self._catalog = catalog

    @classmethod
    def from_catalog(cls, catalog: TransactionCatalog) -> SalesStatisticsQuery:
        return cls(catalog=catalog)

    async def execute(self, month: Month) -> SalesStatisticsResult:
        month_filter = TransactionFilter.build(month=month)
        sold_filter = month_filter.with_sold(True)

        total_sale_amount, total_sold, total_not_sold = await asyncio.gather(
            self._catalog.sum_price(sold_filter),
            self._catalog.count(sold_filter),
            self._catalog.count(month_filter.with_sold(False)),
        )

        logger.debug(
            "Statistics for %s: amount=%s sold=%d not_sold=%d",
            month,
            total_sale_amount,
            total_sold,
            total_not_sold,
        )
        return SalesStatisticsResult(
            month=month.index,
            total_sale_amount=total_sale_amount,
            total_sold_items=total_sold,
            total_not_sold_items=total_not_sold,
        )
