"""Offset pagination value object."""

from __future__ import annotations

from dataclasses import dataclass

from salesdash.domain.catalog.exceptions import InvalidPaginationError

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100
# Largest row offset a SQL backend accepts (signed 64-bit).
MAX_OFFSET = 2**63 - 1


def _parse_int(raw: str | int | None) -> int | None:
    """Parse a raw query value; None when absent or not an integer."""
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class PageRequest:
    """A 1-based page of ``per_page`` items."""

    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise InvalidPaginationError("page", self.page)
        if self.per_page < 1:
            raise InvalidPaginationError("perPage", self.per_page)
        if self.offset > MAX_OFFSET:
            raise InvalidPaginationError("page", self.page, "is out of range")

    @classmethod
    def from_raw(
        cls,
        page: str | int | None = None,
        per_page: str | int | None = None,
        *,
        default_per_page: int = DEFAULT_PER_PAGE,
        max_per_page: int = MAX_PER_PAGE,
    ) -> PageRequest:
        """Build a page request from raw query values.

        Absent or non-numeric values fall back to the defaults, zero or
        negative values are rejected, ``per_page`` is capped at
        ``max_per_page`` and pages whose offset exceeds ``MAX_OFFSET``
        are rejected.
        """
        parsed_page = _parse_int(page)
        parsed_per_page = _parse_int(per_page)
        if parsed_per_page is None:
            parsed_per_page = default_per_page
        elif parsed_per_page > max_per_page:
            parsed_per_page = max_per_page

        return cls(
            page=DEFAULT_PAGE if parsed_page is None else parsed_page,
            per_page=parsed_per_page,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page
