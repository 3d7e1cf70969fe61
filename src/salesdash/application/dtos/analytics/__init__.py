"""Analytics DTOs (statistics and chart data)."""

from salesdash.application.dtos.analytics.analytics_dto import (
    CategoryCount,
    CategoryDistributionResult,
    CombinedSummaryResult,
    PriceRangeChartResult,
    SalesStatisticsResult,
)

__all__ = [
    "CategoryCount",
    "CategoryDistributionResult",
    "CombinedSummaryResult",
    "PriceRangeChartResult",
    "SalesStatisticsResult",
]
