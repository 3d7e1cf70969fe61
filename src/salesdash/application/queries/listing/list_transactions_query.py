"""List catalog records by free-text search, one page at a time."""

from __future__ import annotations

import asyncio

from salesdash.application.dtos.listing import TransactionPage
from salesdash.domain.catalog import PageRequest, TransactionCatalog, TransactionFilter


async def fetch_page(
    catalog: TransactionCatalog,
    transaction_filter: TransactionFilter,
    page_request: PageRequest,
) -> TransactionPage:
    """Load one page of ``transaction_filter`` and the pre-paging total."""
    items, total = await asyncio.gather(
        catalog.find(
            transaction_filter,
            offset=page_request.offset,
            limit=page_request.limit,
        ),
        catalog.count(transaction_filter),
    )
    return TransactionPage(
        items=items,
        total_items=total,
        page=page_request.page,
        per_page=page_request.per_page,
    )


class ListTransactionsQuery:
    """Search titles and descriptions across all months."""

    def __init__(self, catalog: TransactionCatalog):
        self._catalog = catalog

    @classmethod
    def from_catalog(cls, catalog: TransactionCatalog) -> ListTransactionsQuery:
        return cls(catalog=catalog)

    async def execute(
        self,
        page_request: PageRequest,
        search: str | None = None,
    ) -> TransactionPage:
        return await fetch_page(
            self._catalog,
            TransactionFilter.build(search=search),
            page_request,
        )
