"""Integration tests for SqlAlchemyTransactionCatalog against SQLite."""

import asyncio
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy import select

from salesdash.application.queries import (
    CategoryDistributionQuery,
    PriceRangeChartQuery,
    SalesStatisticsQuery,
)
from salesdash.domain.catalog import (
    PRICE_BUCKETS,
    CategoryCountRow,
    Month,
    PriceRange,
    ProductTransaction,
    TransactionFilter,
)
from salesdash.infrastructure.persistence.sqlalchemy.engine import create_session_maker
from salesdash.infrastructure.persistence.sqlalchemy.models import (
    ProductTransactionModel,
)
from tests.shared.fixtures.catalog import InMemoryTransactionCatalog
from tests.shared.fixtures.factories import RecordFactory

pytestmark = pytest.mark.integration

MARCH = TransactionFilter.build(month=Month(3))


@pytest_asyncio.fixture
async def seeded_catalog(sqlite_catalog):
    await sqlite_catalog.insert_many(RecordFactory.mixed_dataset())
    return sqlite_catalog


class TestInsertMany:
    @pytest.mark.asyncio
    async def test_insert_and_read_back(self, sqlite_catalog):
        records = RecordFactory.abc_example()

        inserted = await sqlite_catalog.insert_many(records)
        stored = await sqlite_catalog.find(TransactionFilter())

        assert inserted == 3
        assert [r.title for r in stored] == ["A", "B", "C"]
        assert [r.catalog_id for r in stored] == [1, 2, 3]
        assert stored[0].price == Decimal("50.00")
        assert stored[0].date_of_sale == records[0].date_of_sale
        assert stored[0].date_of_sale.tzinfo is not None

    @pytest.mark.asyncio
    async def test_empty_insert(self, sqlite_catalog):
        assert await sqlite_catalog.insert_many([]) == 0
        assert await sqlite_catalog.count(TransactionFilter()) == 0

    @pytest.mark.asyncio
    async def test_duplicate_source_ids_are_kept(self, sqlite_catalog):
        await sqlite_catalog.insert_many(RecordFactory.abc_example())
        await sqlite_catalog.insert_many(RecordFactory.abc_example())

        stored = await sqlite_catalog.find(TransactionFilter())

        assert len(stored) == 6
        assert len({r.catalog_id for r in stored}) == 6

    @pytest.mark.asyncio
    async def test_aware_dates_stored_in_utc(self, sqlite_catalog, async_engine):
        local = timezone(timedelta(hours=5, minutes=30))
        record = ProductTransaction(
            source_id=1,
            title="Late night sale",
            description="",
            category="books",
            price=Decimal("5.00"),
            image="",
            sold=True,
            date_of_sale=datetime(2021, 12, 1, 2, 0, tzinfo=local),
        )

        await sqlite_catalog.insert_many([record])

        async with create_session_maker(async_engine)() as session:
            model = (await session.execute(select(ProductTransactionModel))).scalar_one()
        assert model.date_of_sale.replace(tzinfo=None) == datetime(2021, 11, 30, 20, 30)
        assert await sqlite_catalog.count(TransactionFilter.build(month=Month(11))) == 1


class TestFilters:
    @pytest.mark.asyncio
    async def test_month_matches_any_year(self, seeded_catalog):
        stored = await seeded_catalog.find(MARCH)

        assert {r.source_id for r in stored} == {10, 11, 12, 13, 14, 15}

    @pytest.mark.asyncio
    async def test_undated_record_never_matches_a_month(self, seeded_catalog):
        counts = await asyncio.gather(
            *(
                seeded_catalog.count(TransactionFilter.build(month=Month(i)))
                for i in range(1, 13)
            ),
        )

        assert sum(counts) == 7
        assert await seeded_catalog.count(TransactionFilter()) == 8

    @pytest.mark.asyncio
    async def test_search_case_insensitive(self, seeded_catalog):
        stored = await seeded_catalog.find(TransactionFilter.build(search="MONITOR"))

        assert {r.source_id for r in stored} == {13, 16}

    @pytest.mark.asyncio
    async def test_search_special_characters_are_literal(self, seeded_catalog):
        assert await seeded_catalog.count(TransactionFilter.build(search="100%")) == 1
        assert await seeded_catalog.count(TransactionFilter.build(search="1_0")) == 0
        assert await seeded_catalog.count(TransactionFilter.build(search="%%")) == 0

    @pytest.mark.asyncio
    async def test_sold_filter(self, seeded_catalog):
        assert await seeded_catalog.count(MARCH.with_sold(True)) == 3
        assert await seeded_catalog.count(MARCH.with_sold(False)) == 3

    @pytest.mark.asyncio
    async def test_price_range_boundaries(self, seeded_catalog):
        first = MARCH.with_price_range(
            PriceRange(minimum=Decimal("0"), maximum=Decimal("100")),
        )
        second = MARCH.with_price_range(
            PriceRange(
                minimum=Decimal("100"),
                maximum=Decimal("200"),
                include_minimum=False,
            ),
        )

        assert await seeded_catalog.count(first) == 2
        assert await seeded_catalog.count(second) == 3

    @pytest.mark.asyncio
    async def test_offset_and_limit(self, seeded_catalog):
        page = await seeded_catalog.find(TransactionFilter(), offset=2, limit=3)

        assert [r.source_id for r in page] == [12, 13, 14]


class TestAggregates:
    @pytest.mark.asyncio
    async def test_sum_price(self, seeded_catalog):
        assert await seeded_catalog.sum_price(MARCH.with_sold(True)) == Decimal(
            "391.95",
        )

    @pytest.mark.asyncio
    async def test_sum_price_of_nothing_is_zero(self, seeded_catalog):
        total = await seeded_catalog.sum_price(TransactionFilter.build(month=Month(1)))

        assert total == Decimal("0")
        assert isinstance(total, Decimal)

    @pytest.mark.asyncio
    async def test_count_by_category_ordered_by_name(self, seeded_catalog):
        rows = await seeded_catalog.count_by_category(MARCH)

        assert rows == [
            CategoryCountRow("electronics", 2),
            CategoryCountRow("jewelery", 1),
            CategoryCountRow("men's clothing", 2),
            CategoryCountRow("women's clothing", 1),
        ]


class TestQueriesAgreeWithInMemoryCatalog:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("index", [3, 7, 12])
    async def test_dashboard_queries(self, seeded_catalog, index):
        reference = InMemoryTransactionCatalog(RecordFactory.mixed_dataset())
        month = Month(index)

        for query_class in (
            SalesStatisticsQuery,
            PriceRangeChartQuery,
            CategoryDistributionQuery,
        ):
            assert await query_class(seeded_catalog).execute(month) == await (
                query_class(reference).execute(month)
            )

    @pytest.mark.asyncio
    async def test_bar_chart_bucket_edges(self, sqlite_catalog):
        edges = [0] + [
            edge for ceiling in range(100, 1000, 100) for edge in (ceiling, ceiling + 1)
        ]
        prices = [str(edge) for edge in edges] + ["1000", "0.01", "100.50", "900.01"]
        records = [
            RecordFactory.record(source_id=i, price=price, month=5)
            for i, price in enumerate(prices)
        ]
        await sqlite_catalog.insert_many(records)
        reference = InMemoryTransactionCatalog(records)

        result = await PriceRangeChartQuery(sqlite_catalog).execute(Month(5))

        assert result == await PriceRangeChartQuery(reference).execute(Month(5))
        assert result.price_range_counts == {
            "0-100": 3,
            "101-200": 3,
            "201-300": 2,
            "301-400": 2,
            "401-500": 2,
            "501-600": 2,
            "601-700": 2,
            "701-800": 2,
            "801-900": 2,
            "901-Infinity": 3,
        }

    @pytest.mark.asyncio
    async def test_bar_chart_runs_bucket_counts_concurrently(self, seeded_catalog):
        result = await PriceRangeChartQuery(seeded_catalog).execute(Month(3))

        assert list(result.price_range_counts) == [b.label for b in PRICE_BUCKETS]
        assert result.total == 6
