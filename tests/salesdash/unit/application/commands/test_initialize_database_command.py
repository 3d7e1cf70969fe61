"""Unit tests for InitializeDatabaseCommand."""

from unittest.mock import AsyncMock

import pytest

from salesdash.application.commands import InitializeDatabaseCommand, SeedResult
from salesdash.domain.catalog import SeedSourceError
from tests.shared.fixtures.catalog import InMemoryTransactionCatalog
from tests.shared.fixtures.factories import RecordFactory

SOURCE_URL = "https://example.com/product_transaction.json"


def _seed_source(records=None, error: Exception | None = None) -> AsyncMock:
    seed_source = AsyncMock()
    seed_source.source_url = SOURCE_URL
    if error is not None:
        seed_source.fetch_records.side_effect = error
    else:
        seed_source.fetch_records.return_value = records or []
    return seed_source


class TestInitializeDatabaseCommand:
    @pytest.mark.asyncio
    async def test_inserts_every_fetched_record(self):
        catalog = InMemoryTransactionCatalog()
        records = RecordFactory.abc_example()

        result = await InitializeDatabaseCommand(
            catalog=catalog,
            seed_source=_seed_source(records),
        ).execute()

        assert result == SeedResult(source_url=SOURCE_URL, fetched=3, inserted=3)
        assert catalog.records == records

    @pytest.mark.asyncio
    async def test_running_twice_duplicates_records(self):
        catalog = InMemoryTransactionCatalog()
        command = InitializeDatabaseCommand(
            catalog=catalog,
            seed_source=_seed_source(RecordFactory.abc_example()),
        )

        await command.execute()
        await command.execute()

        assert len(catalog.records) == 6

    @pytest.mark.asyncio
    async def test_seed_failure_leaves_catalog_untouched(self):
        catalog = AsyncMock()
        command = InitializeDatabaseCommand(
            catalog=catalog,
            seed_source=_seed_source(error=SeedSourceError(SOURCE_URL, "HTTP 503")),
        )

        with pytest.raises(SeedSourceError) as exc_info:
            await command.execute()

        assert exc_info.value.message == "Failed to initialize database"
        catalog.insert_many.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_dataset(self):
        catalog = InMemoryTransactionCatalog()

        result = await InitializeDatabaseCommand(
            catalog=catalog,
            seed_source=_seed_source([]),
        ).execute()

        assert result.inserted == 0
