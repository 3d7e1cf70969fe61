"""Seed source port.

Provides the initial product transaction dataset. Implementations raise
SeedSourceError when the dataset cannot be fetched or parsed.
"""

from __future__ import annotations

from typing import Protocol

from salesdash.domain.catalog import ProductTransaction


class SeedSourcePort(Protocol):
    """Read-only access to the remote seed dataset."""

    @property
    def source_url(self) -> str:
        """Where the dataset is loaded from (for logging)."""
        ...

    async def fetch_records(self) -> list[ProductTransaction]:
        """Fetch and parse every record of the dataset."""
        ...
