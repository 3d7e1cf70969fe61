"""Unit tests for ListTransactionsQuery and ListProductsQuery."""

import pytest

from salesdash.application.queries import ListProductsQuery, ListTransactionsQuery
from salesdash.domain.catalog import Month, PageRequest
from tests.shared.fixtures.catalog import InMemoryTransactionCatalog
from tests.shared.fixtures.factories import RecordFactory


@pytest.fixture
def catalog() -> InMemoryTransactionCatalog:
    return InMemoryTransactionCatalog(RecordFactory.mixed_dataset())


class TestListTransactionsQuery:
    @pytest.mark.asyncio
    async def test_lists_everything_without_search(self, catalog):
        page = await ListTransactionsQuery.from_catalog(catalog).execute(
            PageRequest(page=1, per_page=10),
        )

        assert page.total_items == 8
        assert page.total_pages == 1
        assert [r.source_id for r in page.items] == list(range(10, 18))

    @pytest.mark.asyncio
    async def test_empty_search_equals_no_search(self, catalog):
        query = ListTransactionsQuery(catalog)
        page_request = PageRequest(page=1, per_page=10)

        assert await query.execute(page_request, search="") == await query.execute(
            page_request,
        )

    @pytest.mark.asyncio
    async def test_search_across_months(self, catalog):
        page = await ListTransactionsQuery(catalog).execute(
            PageRequest(),
            search="monitor",
        )

        assert {r.source_id for r in page.items} == {13, 16}
        assert page.total_items == 2

    @pytest.mark.asyncio
    async def test_pagination(self, catalog):
        query = ListTransactionsQuery(catalog)

        first = await query.execute(PageRequest(page=1, per_page=3))
        last = await query.execute(PageRequest(page=3, per_page=3))

        assert len(first.items) == 3
        assert len(last.items) == 2
        assert first.total_items == last.total_items == 8
        assert first.total_pages == 3

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, catalog):
        page = await ListTransactionsQuery(catalog).execute(
            PageRequest(page=5, per_page=10),
        )

        assert page.items == []
        assert page.total_items == 8
        assert page.page == 5


class TestListProductsQuery:
    @pytest.mark.asyncio
    async def test_month_scoped(self, catalog):
        page = await ListProductsQuery.from_catalog(catalog).execute(
            Month(3),
            PageRequest(page=1, per_page=10),
        )

        assert page.total_items == 6
        assert all(r.sale_month == 3 for r in page.items)

    @pytest.mark.asyncio
    async def test_month_and_search(self, catalog):
        page = await ListProductsQuery(catalog).execute(
            Month(3),
            PageRequest(),
            search="GAMING",
        )

        assert {r.source_id for r in page.items} == {13, 14}

    @pytest.mark.asyncio
    async def test_page_size_bound(self, catalog):
        page = await ListProductsQuery(catalog).execute(
            Month(3),
            PageRequest(page=2, per_page=4),
        )

        assert len(page.items) == 2
        assert page.total_pages == 2
