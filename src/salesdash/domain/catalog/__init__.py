"""Catalog domain: product transaction records and how they are queried."""

from salesdash.domain.catalog.entities import ProductTransaction
from salesdash.domain.catalog.exceptions import (
    InvalidMonthError,
    InvalidPaginationError,
    SeedSourceError,
)
from salesdash.domain.catalog.repositories import (
    CategoryCountRow,
    TransactionCatalog,
)
from salesdash.domain.catalog.value_objects import (
    MONTH_NAMES,
    PRICE_BUCKETS,
    Month,
    PageRequest,
    PriceBucket,
    PriceRange,
    TransactionFilter,
    resolve_month,
)

__all__ = [
    "MONTH_NAMES",
    "PRICE_BUCKETS",
    "CategoryCountRow",
    "InvalidMonthError",
    "InvalidPaginationError",
    "Month",
    "PageRequest",
    "PriceBucket",
    "PriceRange",
    "ProductTransaction",
    "SeedSourceError",
    "TransactionCatalog",
    "TransactionFilter",
    "resolve_month",
]
