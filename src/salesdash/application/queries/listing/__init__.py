"""Listing queries."""

from salesdash.application.queries.listing.list_products_query import (
    ListProductsQuery,
)
from salesdash.application.queries.listing.list_transactions_query import (
    ListTransactionsQuery,
    fetch_page,
)

__all__ = ["ListProductsQuery", "ListTransactionsQuery", "fetch_page"]
