"""Pydantic schemas for the transaction and product listings."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from salesdash.application.dtos.listing import TransactionPage
from salesdash.domain.catalog import ProductTransaction


class ProductTransactionResponse(BaseModel):
    """A single catalog record."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": 1,
                "id": 1,
                "title": "Fjallraven  Foldsack No. 1 Backpack, Fits 15 Laptops",
                "price": 329.85,
                "description": "Your perfect pack for everyday use and walks in the forest.",
                "category": "men's clothing",
                "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
                "sold": False,
                "dateOfSale": "2021-11-27T15:59:54Z",
            },
        },
    )

    catalog_id: int | None = Field(alias="_id", description="Catalog key")
    id: int = Field(description="Identifier from the seed dataset")
    title: str
    price: float
    description: str
    category: str
    image: str
    sold: bool
    date_of_sale: datetime | None = Field(alias="dateOfSale")

    @classmethod
    def from_domain(cls, record: ProductTransaction) -> ProductTransactionResponse:
        return cls(
            catalog_id=record.catalog_id,
            id=record.source_id,
            title=record.title,
            price=float(record.price),
            description=record.description,
            category=record.category,
            image=record.image,
            sold=record.sold,
            date_of_sale=record.date_of_sale,
        )


class TransactionsPagination(BaseModel):
    """Pagination block of ``/transactions``."""

    model_config = ConfigDict(populate_by_name=True)

    total_items: int = Field(alias="totalItems")
    total_pages: int = Field(alias="totalPages")
    current_page: int = Field(alias="currentPage")
    items_per_page: int = Field(alias="itemsPerPage")


class TransactionsListResponse(BaseModel):
    """Search results across all months."""

    transactions: list[ProductTransactionResponse]
    pagination: TransactionsPagination

    @classmethod
    def from_page(cls, page: TransactionPage) -> TransactionsListResponse:
        return cls(
            transactions=[
                ProductTransactionResponse.from_domain(item) for item in page.items
            ],
            pagination=TransactionsPagination(
                total_items=page.total_items,
                total_pages=page.total_pages,
                current_page=page.page,
                items_per_page=page.per_page,
            ),
        )


class ProductsPagination(BaseModel):
    """Pagination block of ``/products``."""

    model_config = ConfigDict(populate_by_name=True)

    page: int
    per_page: int = Field(alias="perPage")
    total_pages: int = Field(alias="totalPages")
    total_products: int = Field(alias="totalProducts")


class ProductsListResponse(BaseModel):
    """One month's records, optionally searched."""

    products: list[ProductTransactionResponse]
    pagination: ProductsPagination

    @classmethod
    def from_page(cls, page: TransactionPage) -> ProductsListResponse:
        return cls(
            products=[ProductTransactionResponse.from_domain(item) for item in page.items],
            pagination=ProductsPagination(
                page=page.page,
                per_page=page.per_page,
                total_pages=page.total_pages,
                total_products=page.total_items,
            ),
        )
