"""Composable filter over catalog records.

A TransactionFilter is the single description of "which records" used by
every listing and aggregation. Stores translate it into their own query
language; ``matches`` evaluates the same predicate in memory.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from salesdash.domain.catalog.value_objects.month import Month
from salesdash.domain.catalog.value_objects.price_range import PriceRange

if TYPE_CHECKING:
    from salesdash.domain.catalog.entities import ProductTransaction


def normalize_search(search: str | None) -> str | None:
    """Return the search term, or None when it is absent or blank."""
    if search is None:
        return None
    stripped = search.strip()
    return stripped or None


@dataclass(frozen=True)
class TransactionFilter:
    """Conjunction of optional clauses.

    Attributes
    ----------
    month
        Sale month-of-year (any year). Records without a sale date never match.
    search
        Case-insensitive substring of title OR description. Never blank.
    sold
        Exact sold flag.
    price_range
        Price interval.
    """

    month: Month | None = None
    search: str | None = None
    sold: bool | None = None
    price_range: PriceRange | None = None

    @classmethod
    def build(
        cls,
        *,
        month: Month | None = None,
        search: str | None = None,
        sold: bool | None = None,
        price_range: PriceRange | None = None,
    ) -> TransactionFilter:
        return cls(
            month=month,
            search=normalize_search(search),
            sold=sold,
            price_range=price_range,
        )

    def with_sold(self, sold: bool | None) -> TransactionFilter:
        return replace(self, sold=sold)

    def with_price_range(self, price_range: PriceRange | None) -> TransactionFilter:
        return replace(self, price_range=price_range)

    def matches(self, record: ProductTransaction) -> bool:
        if self.month is not None and record.sale_month != self.month.index:
            return False

        if self.search is not None:
            needle = self.search.lower()
            if (
                needle not in record.title.lower()
                and needle not in record.description.lower()
            ):
                return False

        if self.sold is not None and record.sold is not self.sold:
            return False

        return self.price_range is None or self.price_range.contains(record.price)
