"""Pydantic schemas for API responses."""

from salesdash.presentation.api.schemas.analytics import (
    BarChartResponse,
    CategoryCountResponse,
    CombinedResponse,
    PieChartResponse,
    StatisticsResponse,
)
from salesdash.presentation.api.schemas.common import ErrorResponse, HealthResponse
from salesdash.presentation.api.schemas.seed import InitializeDatabaseResponse
from salesdash.presentation.api.schemas.transactions import (
    ProductsListResponse,
    ProductsPagination,
    ProductTransactionResponse,
    TransactionsListResponse,
    TransactionsPagination,
)

__all__ = [
    "BarChartResponse",
    "CategoryCountResponse",
    "CombinedResponse",
    "ErrorResponse",
    "HealthResponse",
    "InitializeDatabaseResponse",
    "PieChartResponse",
    "ProductTransactionResponse",
    "ProductsListResponse",
    "ProductsPagination",
    "StatisticsResponse",
    "TransactionsListResponse",
    "TransactionsPagination",
]
