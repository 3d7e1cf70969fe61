"""Listing routers for ``/transactions`` and ``/products``."""

from fastapi import APIRouter

from salesdash.application.queries import ListProductsQuery, ListTransactionsQuery
from salesdash.domain.catalog import PageRequest, resolve_month
from salesdash.presentation.api.dependencies import CatalogDep, SettingsDep
from salesdash.presentation.api.routers.params import (
    MonthParam,
    PageParam,
    PerPageParam,
    SearchParam,
)
from salesdash.presentation.api.schemas import (
    ErrorResponse,
    ProductsListResponse,
    TransactionsListResponse,
)
from salesdash_config.settings import Settings

router = APIRouter()


def _page_request(
    settings: Settings,
    page: str | None,
    per_page: str | None,
) -> PageRequest:
    return PageRequest.from_raw(
        page,
        per_page,
        default_per_page=settings.default_per_page,
        max_per_page=settings.max_per_page,
    )


@router.get(
    "/transactions",
    summary="Search transactions",
    responses={
        200: {"description": "One page of matching transactions"},
        400: {"model": ErrorResponse, "description": "Invalid pagination"},
    },
)
async def list_transactions(
    catalog: CatalogDep,
    settings: SettingsDep,
    search: SearchParam = None,
    page: PageParam = None,
    per_page: PerPageParam = None,
) -> TransactionsListResponse:
    """
    List transactions across all months.

    `search` matches title or description; an empty search lists everything.
    Results are ordered by catalog key.
    """
    page_request = _page_request(settings, page, per_page)
    query = ListTransactionsQuery.from_catalog(catalog)
    result = await query.execute(page_request, search=search)
    return TransactionsListResponse.from_page(result)


@router.get(
    "/products",
    summary="List a month's products",
    responses={
        200: {"description": "One page of the month's records"},
        400: {"model": ErrorResponse, "description": "Invalid month or pagination"},
    },
)
async def list_products(
    catalog: CatalogDep,
    settings: SettingsDep,
    month: MonthParam = None,
    search: SearchParam = None,
    page: PageParam = None,
    per_page: PerPageParam = None,
) -> ProductsListResponse:
    """List records sold in `month` (any year), optionally searched."""
    resolved = resolve_month(month)
    page_request = _page_request(settings, page, per_page)
    query = ListProductsQuery.from_catalog(catalog)
    result = await query.execute(resolved, page_request, search=search)
    return ProductsListResponse.from_page(result)
