"""Catalog domain exceptions."""

from typing import Any

from salesdash.domain.shared.exceptions import (
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)


class InvalidMonthError(ValidationError):
    """Raised when a month parameter is neither a month name nor 1..12."""

    def __init__(self, raw_value: str | None) -> None:
        if raw_value is None or not raw_value.strip():
            message = "Month is required (name like 'March' or number 1-12)"
        else:
            message = (
                f"Invalid month '{raw_value}': "
                "expected an English month name or a number from 1 to 12"
            )
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_MONTH,
            details={"month": raw_value},
        )


class InvalidPaginationError(ValidationError):
    """Raised when page or perPage is out of range."""

    def __init__(
        self,
        field: str,
        value: int,
        reason: str = "must be a positive integer",
    ) -> None:
        super().__init__(
            message=f"'{field}' {reason}, got {value}",
            code=ErrorCode.INVALID_PAGINATION,
            details={"field": field, "value": value},
        )


class SeedSourceError(ExternalServiceError):
    """Raised when the remote seed dataset cannot be fetched or parsed."""

    def __init__(self, source_url: str, reason: str) -> None:
        details: dict[str, Any] = {"source_url": source_url, "reason": reason}
        super().__init__(
            message="Failed to initialize database",
            code=ErrorCode.SEED_SOURCE_FAILED,
            details=details,
        )
