"""Analytics DTOs for the dashboard statistics and charts.

These DTOs hold the month-scoped aggregates behind the statistics box,
the price-range bar chart and the category pie chart.
"""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class SalesStatisticsResult:
    """Sales totals for one month."""

    month: int
    total_sale_amount: Decimal
    total_sold_items: int
    total_not_sold_items: int

    @property
    def total_items(self) -> int:
        return self.total_sold_items + self.total_not_sold_items


@dataclass
class PriceRangeChartResult:
    """Record counts per price bucket (bar chart data).

    Keys are bucket labels ("0-100", ..., "901-Infinity") in bucket order.
    """

    month: int
    price_range_counts: dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.price_range_counts.values())


@dataclass
class CategoryCount:
    """Single slice of the category pie chart."""

    category: str
    count: int


@dataclass
class CategoryDistributionResult:
    """Record counts per category (pie chart data)."""

    month: int
    items: list[CategoryCount] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(item.count for item in self.items)


@dataclass
class CombinedSummaryResult:
    """Statistics, bar chart and pie chart for the same month."""

    month: int
    statistics: SalesStatisticsResult
    bar_chart: PriceRangeChartResult
    category_distribution: CategoryDistributionResult
