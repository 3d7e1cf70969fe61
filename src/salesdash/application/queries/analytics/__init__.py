"""Analytics queries for the dashboard statistics and charts."""

from salesdash.application.queries.analytics.category_distribution_query import (
    CategoryDistributionQuery,
)
from salesdash.application.queries.analytics.combined_summary_query import (
    CombinedSummaryQuery,
)
from salesdash.application.queries.analytics.price_range_chart_query import (
    PriceRangeChartQuery,
)
from salesdash.application.queries.analytics.sales_statistics_query import (
    SalesStatisticsQuery,
)

__all__ = [
    "CategoryDistributionQuery",
    "CombinedSummaryQuery",
    "PriceRangeChartQuery",
    "SalesStatisticsQuery",
]
