"""Analytics router for the dashboard statistics and charts.

Every endpoint is scoped to a month-of-year across all years.
"""

import logging

from fastapi import APIRouter

from salesdash.application.queries import (
    CategoryDistributionQuery,
    CombinedSummaryQuery,
    PriceRangeChartQuery,
    SalesStatisticsQuery,
)
from salesdash.domain.catalog import resolve_month
from salesdash.presentation.api.dependencies import CatalogDep
from salesdash.presentation.api.routers.params import MonthParam
from salesdash.presentation.api.schemas import (
    BarChartResponse,
    CombinedResponse,
    ErrorResponse,
    PieChartResponse,
    StatisticsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_INVALID_MONTH = {400: {"model": ErrorResponse, "description": "Invalid month"}}


@router.get(
    "/statistics",
    summary="Get sales statistics for a month",
    responses={
        200: {"description": "Sale amount and sold/not-sold counts"},
        **_INVALID_MONTH,
    },
)
async def get_statistics(
    catalog: CatalogDep,
    month: MonthParam = None,
) -> StatisticsResponse:
    """
    Get the statistics box for a month.

    - `totalSaleAmount`: sum of prices of sold records
    - `totalSoldItems`: number of sold records
    - `totalNotSoldItems`: number of unsold records
    """
    query = SalesStatisticsQuery.from_catalog(catalog)
    result = await query.execute(resolve_month(month))
    return StatisticsResponse.from_result(result)


@router.get(
    "/bar-chart",
    summary="Get price range distribution for a month",
    responses={
        200: {"description": "Record count per price range"},
        **_INVALID_MONTH,
    },
)
async def get_bar_chart(
    catalog: CatalogDep,
    month: MonthParam = None,
) -> BarChartResponse:
    """
    Count the month's records per price range.

    Ranges are `0-100`, `101-200`, ..., `801-900` and `901-Infinity`;
    every range is present, empty ones with a count of 0.
    """
    query = PriceRangeChartQuery.from_catalog(catalog)
    result = await query.execute(resolve_month(month))
    return BarChartResponse.from_result(result)


@router.get(
    "/pie-chart",
    summary="Get category distribution for a month",
    responses={
        200: {"description": "Record count per category"},
        **_INVALID_MONTH,
    },
)
async def get_pie_chart(
    catalog: CatalogDep,
    month: MonthParam = None,
) -> PieChartResponse:
    """Count the month's records per category, ordered by category name."""
    query = CategoryDistributionQuery.from_catalog(catalog)
    result = await query.execute(resolve_month(month))
    return PieChartResponse.from_result(result)


@router.get(
    "/combined",
    summary="Get statistics and both charts for a month",
    responses={
        200: {"description": "Statistics, bar chart and pie chart data"},
        **_INVALID_MONTH,
    },
)
async def get_combined(
    catalog: CatalogDep,
    month: MonthParam = None,
) -> CombinedResponse:
    """Statistics, bar chart and pie chart in one response."""
    query = CombinedSummaryQuery.from_catalog(catalog)
    result = await query.execute(resolve_month(month))
    logger.debug("Combined summary for month %d", result.month)
    return CombinedResponse.from_result(result)
