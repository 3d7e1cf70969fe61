"""Listing DTOs."""

from salesdash.application.dtos.listing.transaction_page_dto import TransactionPage

__all__ = ["TransactionPage"]
