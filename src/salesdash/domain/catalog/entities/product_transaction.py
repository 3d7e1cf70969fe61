"""Product transaction record held by the transaction catalog."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class ProductTransaction:
    """A single product sale record.

    ``source_id`` is the identifier from the seed dataset and is not unique
    across reseeds; ``catalog_id`` is assigned by the store once persisted.
    """

    source_id: int
    title: str
    description: str
    category: str
    price: Decimal
    image: str
    sold: bool
    date_of_sale: datetime | None
    catalog_id: int | None = None

    @property
    def sale_month(self) -> int | None:
        if self.date_of_sale is None:
            return None
        return self.date_of_sale.month
