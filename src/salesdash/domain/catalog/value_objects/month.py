"""Month-of-year value object and the month parameter resolver."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from salesdash.domain.catalog.exceptions import InvalidMonthError

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_NUMERAL = re.compile(r"^[+-]?\d+$")


class Month(BaseModel):
    """Calendar month index in [1, 12], independent of the year."""

    index: int

    model_config = ConfigDict(frozen=True)

    def __init__(self, index: int | None = None, **data: Any):
        """Support both Month(3) and Month(index=3)."""
        if "index" not in data:
            data["index"] = index
        super().__init__(**data)

    @field_validator("index")
    @classmethod
    def validate_range(cls, v: int) -> int:
        if not 1 <= v <= 12:
            msg = f"Month index must be between 1 and 12, got {v}"
            raise ValueError(msg)
        return v

    @property
    def name(self) -> str:
        return MONTH_NAMES[self.index - 1]

    def __str__(self) -> str:
        return self.name


def resolve_month(raw: str | None) -> Month:
    """Resolve a raw ``month`` query value into a Month.

    Integer strings are read as 1-based month numbers ("3" -> March).
    Anything else must be an exact, case-sensitive English month name.

    Raises
    ------
    InvalidMonthError
        If the value is missing, an unknown name, or a number outside 1..12.
    """
    if raw is None:
        raise InvalidMonthError(raw)

    candidate = raw.strip()
    if _NUMERAL.match(candidate):
        index = int(candidate)
        if not 1 <= index <= 12:
            raise InvalidMonthError(raw)
        return Month(index)

    try:
        return Month(MONTH_NAMES.index(candidate) + 1)
    except ValueError:
        raise InvalidMonthError(raw) from None
