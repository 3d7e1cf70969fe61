"""Seed the transaction catalog from the remote dataset."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from salesdash.application.ports.seed import SeedSourcePort
from salesdash.domain.catalog import TransactionCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedResult:
    """Outcome of a database initialization."""

    source_url: str
    fetched: int
    inserted: int


class InitializeDatabaseCommand:
    """Fetch the seed dataset and insert every record into the catalog.

    Records are appended as-is: running the command twice stores the
    dataset twice.
    """

    def __init__(
        self,
        catalog: TransactionCatalog,
        seed_source: SeedSourcePort,
    ):
        self._catalog = catalog
        self._seed_source = seed_source

    async def execute(self) -> SeedResult:
        logger.info("Fetching seed data from %s", self._seed_source.source_url)
        records = await self._seed_source.fetch_records()

        inserted = await self._catalog.insert_many(records)
        logger.info("Database initialized with %d seed records", inserted)

        return SeedResult(
            source_url=self._seed_source.source_url,
            fetched=len(records),
            inserted=inserted,
        )
