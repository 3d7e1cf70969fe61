"""Value objects for the catalog domain."""

from salesdash.domain.catalog.value_objects.month import (
    MONTH_NAMES,
    Month,
    resolve_month,
)
from salesdash.domain.catalog.value_objects.page_request import PageRequest
from salesdash.domain.catalog.value_objects.price_bucket import (
    OPEN_END_LABEL,
    PRICE_BUCKETS,
    PriceBucket,
    bucket_for_price,
)
from salesdash.domain.catalog.value_objects.price_range import PriceRange
from salesdash.domain.catalog.value_objects.transaction_filter import (
    TransactionFilter,
    normalize_search,
)

__all__ = [
    "MONTH_NAMES",
    "OPEN_END_LABEL",
    "PRICE_BUCKETS",
    "Month",
    "PageRequest",
    "PriceBucket",
    "PriceRange",
    "TransactionFilter",
    "bucket_for_price",
    "normalize_search",
    "resolve_month",
]
