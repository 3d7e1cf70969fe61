"""Catalog entities."""

from salesdash.domain.catalog.entities.product_transaction import ProductTransaction

__all__ = ["ProductTransaction"]
