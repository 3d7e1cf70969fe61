"""Statistics, bar chart and pie chart for one month in a single result."""

from __future__ import annotations

import asyncio

from salesdash.application.dtos.analytics import CombinedSummaryResult
from salesdash.application.queries.analytics.category_distribution_query import (
    CategoryDistributionQuery,
)
from salesdash.application.queries.analytics.price_range_chart_query import (
    PriceRangeChartQuery,
)
from salesdash.application.queries.analytics.sales_statistics_query import (
    SalesStatisticsQuery,
)
from salesdash.domain.catalog import Month, TransactionCatalog


class CombinedSummaryQuery:
    """Compose the three dashboard queries.

    A failure in any of them propagates; there are no partial results.
    """

    def __init__(
        self,
        statistics_query: SalesStatisticsQuery,
        price_range_chart_query: PriceRangeChartQuery,
        category_distribution_query: CategoryDistributionQuery,
    ):
        self._statistics = statistics_query
        self._bar_chart = price_range_chart_query
        self._categories = category_distribution_query

    @classmethod
    def from_catalog(cls, catalog: TransactionCatalog) -> CombinedSummaryQuery:
        return cls(
            statistics_query=SalesStatisticsQuery.from_catalog(catalog),
            price_range_chart_query=PriceRangeChartQuery.from_catalog(catalog),
            category_distribution_query=CategoryDistributionQuery.from_catalog(catalog),
        )

    async def execute(self, month: Month) -> CombinedSummaryResult:
        statistics, bar_chart, category_distribution = await asyncio.gather(
            self._statistics.execute(month),
            self._bar_chart.execute(month),
            self._categories.execute(month),
        )
        return CombinedSummaryResult(
            month=month.index,
            statistics=statistics,
            bar_chart=bar_chart,
            category_distribution=category_distribution,
        )
