"""Application queries (read side)."""

from salesdash.application.queries.analytics import (
    CategoryDistributionQuery,
    CombinedSummaryQuery,
    PriceRangeChartQuery,
    SalesStatisticsQuery,
)
from salesdash.application.queries.listing import (
    ListProductsQuery,
    ListTransactionsQuery,
)

__all__ = [
    "CategoryDistributionQuery",
    "CombinedSummaryQuery",
    "ListProductsQuery",
    "ListTransactionsQuery",
    "PriceRangeChartQuery",
    "SalesStatisticsQuery",
]
