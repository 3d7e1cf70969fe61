"""List a month's catalog records with optional search, one page at a time."""

from __future__ import annotations

from salesdash.application.dtos.listing import TransactionPage
from salesdash.application.queries.listing.list_transactions_query import fetch_page
from salesdash.domain.catalog import (
    Month,
    PageRequest,
    TransactionCatalog,
    TransactionFilter,
)


class ListProductsQuery:
    """Month-scoped variant of the transaction listing."""

    def __init__(self, catalog: TransactionCatalog):
        self._catalog = catalog

    @classmethod
    def from_catalog(cls, catalog: TransactionCatalog) -> ListProductsQuery:
        return cls(catalog=catalog)

    async def execute(
        self,
        month: Month,
        page_request: PageRequest,
        search: str | None = None,
    ) -> TransactionPage:
        return await fetch_page(
            self._catalog,
            TransactionFilter.build(month=month, search=search),
            page_request,
        )
