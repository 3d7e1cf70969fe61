"""Shared domain building blocks."""

from salesdash.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)
from salesdash.domain.shared.time import ensure_utc, utc_now

__all__ = [
    "DomainException",
    "ErrorCode",
    "ExternalServiceError",
    "ValidationError",
    "ensure_utc",
    "utc_now",
]
