"""Pydantic schemas for the dashboard statistics and chart endpoints.

Field names follow the dashboard frontend (camelCase on the wire).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from salesdash.application.dtos.analytics import (
    CategoryDistributionResult,
    CombinedSummaryResult,
    PriceRangeChartResult,
    SalesStatisticsResult,
)


class StatisticsResponse(BaseModel):
    """Statistics box for a month."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "totalSaleAmount": 32546.72,
                "totalSoldItems": 4,
                "totalNotSoldItems": 6,
            },
        },
    )

    total_sale_amount: float = Field(
        alias="totalSaleAmount",
        description="Sum of prices of sold records",
    )
    total_sold_items: int = Field(alias="totalSoldItems")
    total_not_sold_items: int = Field(alias="totalNotSoldItems")

    @classmethod
    def from_result(cls, result: SalesStatisticsResult) -> StatisticsResponse:
        return cls(
            total_sale_amount=float(result.total_sale_amount),
            total_sold_items=result.total_sold_items,
            total_not_sold_items=result.total_not_sold_items,
        )


class BarChartResponse(BaseModel):
    """Record counts per price range, in range order."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "priceRangeCounts": {
                    "0-100": 3,
                    "101-200": 1,
                    "201-300": 0,
                    "901-Infinity": 2,
                },
            },
        },
    )

    price_range_counts: dict[str, int] = Field(alias="priceRangeCounts")

    @classmethod
    def from_result(cls, result: PriceRangeChartResult) -> BarChartResponse:
        return cls(price_range_counts=dict(result.price_range_counts))


class CategoryCountResponse(BaseModel):
    """One pie chart slice."""

    model_config = ConfigDict(populate_by_name=True)

    category: str = Field(alias="_id", description="Category name")
    count: int


class PieChartResponse(BaseModel):
    """Record counts per category."""

    model_config = ConfigDict(populate_by_name=True)

    category_counts: list[CategoryCountResponse] = Field(alias="categoryCounts")

    @classmethod
    def from_result(cls, result: CategoryDistributionResult) -> PieChartResponse:
        return cls(category_counts=_category_items(result))


class CombinedResponse(BaseModel):
    """Statistics, bar chart and pie chart data for the same month."""

    model_config = ConfigDict(populate_by_name=True)

    statistics: StatisticsResponse
    bar_chart: BarChartResponse = Field(alias="barChart")
    category_distribution: list[CategoryCountResponse] = Field(
        alias="categoryDistribution",
    )

    @classmethod
    def from_result(cls, result: CombinedSummaryResult) -> CombinedResponse:
        return cls(
            statistics=StatisticsResponse.from_result(result.statistics),
            bar_chart=BarChartResponse.from_result(result.bar_chart),
            category_distribution=_category_items(result.category_distribution),
        )


def _category_items(result: CategoryDistributionResult) -> list[CategoryCountResponse]:
    return [
        CategoryCountResponse(category=item.category, count=item.count)
        for item in result.items
    ]
