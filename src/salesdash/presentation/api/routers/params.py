"""Shared query parameters.

Values are taken as raw strings and parsed by the domain so that malformed
input produces the same error body as every other domain error.
"""

from typing import Annotated

from fastapi import Query

MonthParam = Annotated[
    str | None,
    Query(
        description="Month name (e.g. 'March') or number 1-12; matches any year",
        examples=["March"],
    ),
]
SearchParam = Annotated[
    str | None,
    Query(description="Case-insensitive text matched against title or description"),
]
PageParam = Annotated[
    str | None,
    Query(description="1-based page number (default 1)"),
]
PerPageParam = Annotated[
    str | None,
    Query(alias="perPage", description="Items per page (default 10, capped)"),
]
