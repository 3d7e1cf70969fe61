"""Fixed price buckets for the bar-chart histogram.

The buckets partition the non-negative price axis:

    0-100      0 <= p <= 100
    101-200  100 <  p <= 200
    ...
    801-900  800 <  p <= 900
    901-Infinity     p >  900

Labels keep the integer form of the dataset (an item priced 101 is in
"101-200"), while the lower bound of every bucket after the first is
exclusive so fractional prices such as 100.50 land in exactly one bucket.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from salesdash.domain.catalog.value_objects.price_range import PriceRange

OPEN_END_LABEL = "Infinity"

BUCKET_WIDTH = 100
BUCKET_COUNT = 10


@dataclass(frozen=True)
class PriceBucket:
    """One bar of the price histogram."""

    floor: int
    ceiling: int | None

    @property
    def label(self) -> str:
        low = self.floor if self.floor == 0 else self.floor + 1
        high = OPEN_END_LABEL if self.ceiling is None else str(self.ceiling)
        return f"{low}-{high}"

    def to_price_range(self) -> PriceRange:
        return PriceRange(
            minimum=Decimal(self.floor),
            maximum=None if self.ceiling is None else Decimal(self.ceiling),
            include_minimum=self.floor == 0,
        )


def _build_buckets() -> tuple[PriceBucket, ...]:
    buckets = [
        PriceBucket(floor=i * BUCKET_WIDTH, ceiling=(i + 1) * BUCKET_WIDTH)
        for i in range(BUCKET_COUNT - 1)
    ]
    buckets.append(PriceBucket(floor=(BUCKET_COUNT - 1) * BUCKET_WIDTH, ceiling=None))
    return tuple(buckets)


PRICE_BUCKETS: tuple[PriceBucket, ...] = _build_buckets()


def bucket_for_price(price: Decimal) -> PriceBucket | None:
    """Return the bucket holding ``price`` (None for negative prices)."""
    for bucket in PRICE_BUCKETS:
        if bucket.to_price_range().contains(price):
            return bucket
    return None
