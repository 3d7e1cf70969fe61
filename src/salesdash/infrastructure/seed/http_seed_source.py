"""HTTP seed source.

Downloads the product transaction dataset (a JSON array) and validates each
entry before it reaches the catalog. A single malformed entry rejects the
whole dataset so a reseed never leaves a partial catalog behind.
"""

import logging
from datetime import datetime
from decimal import Decimal

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from salesdash.domain.catalog import ProductTransaction, SeedSourceError
from salesdash.domain.shared.time import ensure_utc

logger = logging.getLogger(__name__)


class SeedRecord(BaseModel):
    """One entry of the remote dataset, as published."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    title: str
    price: Decimal
    description: str = ""
    category: str
    image: str = ""
    sold: bool = False
    date_of_sale: datetime | None = Field(default=None, alias="dateOfSale")

    def to_domain(self) -> ProductTransaction:
        return ProductTransaction(
            source_id=self.id,
            title=self.title,
            description=self.description,
            category=self.category,
            price=self.price,
            image=self.image,
            sold=self.sold,
            date_of_sale=(
                ensure_utc(self.date_of_sale) if self.date_of_sale is not None else None
            ),
        )


_DATASET_ADAPTER = TypeAdapter(list[SeedRecord])


class HttpSeedSource:
    """Fetch the seed dataset over HTTP with httpx."""

    def __init__(self, url: str, timeout: float = 30.0):
        self._url = url
        self._timeout = timeout

    @property
    def source_url(self) -> str:
        return self._url

    async def fetch_records(self) -> list[ProductTransaction]:
        logger.info("Fetching seed dataset from %s", self._url)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._url)
        except httpx.TimeoutException as e:
            logger.error("Seed dataset request timed out: %s", self._url)
            raise SeedSourceError(self._url, "request timed out") from e
        except httpx.HTTPError as e:
            logger.error("Could not fetch seed dataset from %s: %s", self._url, e)
            raise SeedSourceError(self._url, str(e)) from e

        if response.status_code != 200:
            logger.error(
                "Seed dataset request failed: HTTP %d from %s",
                response.status_code,
                self._url,
            )
            raise SeedSourceError(self._url, f"HTTP {response.status_code}")

        try:
            records = _DATASET_ADAPTER.validate_json(response.content)
        except PydanticValidationError as e:
            logger.error(
                "Seed dataset from %s is malformed (%d errors)",
                self._url,
                e.error_count(),
            )
            raise SeedSourceError(self._url, "malformed dataset") from e

        logger.info("Fetched %d seed records", len(records))
        return [record.to_domain() for record in records]
