"""DTO for a page of catalog records."""

import math
from dataclasses import dataclass

from salesdash.domain.catalog import ProductTransaction


@dataclass(frozen=True)
class TransactionPage:
    """One page of matching records plus totals computed before paging."""

    items: list[ProductTransaction]
    total_items: int
    page: int
    per_page: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.per_page)
