"""Price interval used by catalog filters."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PriceRange:
    """Closed price interval, optionally open on the lower end.

    ``maximum=None`` means the range is unbounded above.
    """

    minimum: Decimal
    maximum: Decimal | None = None
    include_minimum: bool = True

    def __post_init__(self) -> None:
        if self.maximum is not None and self.maximum < self.minimum:
            msg = f"Price range maximum {self.maximum} is below minimum {self.minimum}"
            raise ValueError(msg)

    def contains(self, price: Decimal) -> bool:
        if self.include_minimum:
            above = price >= self.minimum
        else:
            above = price > self.minimum
        if not above:
            return False
        return self.maximum is None or price <= self.maximum
