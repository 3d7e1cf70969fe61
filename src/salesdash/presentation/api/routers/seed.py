"""Router for seeding the catalog."""

import logging

from fastapi import APIRouter

from salesdash.application.commands import InitializeDatabaseCommand
from salesdash.presentation.api.dependencies import CatalogDep, SeedSourceDep
from salesdash.presentation.api.schemas import (
    ErrorResponse,
    InitializeDatabaseResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/initialize-database",
    summary="Seed the catalog from the remote dataset",
    responses={
        200: {"description": "Records inserted"},
        500: {"model": ErrorResponse, "description": "Seed dataset unavailable"},
    },
)
async def initialize_database(
    catalog: CatalogDep,
    seed_source: SeedSourceDep,
) -> InitializeDatabaseResponse:
    """
    Fetch the seed dataset and insert it into the catalog.

    Existing records are kept, so calling this twice stores the dataset twice.
    """
    command = InitializeDatabaseCommand(catalog=catalog, seed_source=seed_source)
    result = await command.execute()
    logger.debug(
        "initialize-database inserted %d of %d fetched records",
        result.inserted,
        result.fetched,
    )
    return InitializeDatabaseResponse(
        message="Database initialized with seed data",
        inserted=result.inserted,
    )
