"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers. Endpoints are served at the root
path, matching what the dashboard frontend calls.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from salesdash import __version__
from salesdash.infrastructure.persistence.sqlalchemy.engine import (
    create_engine,
    create_session_maker,
    create_tables,
)
from salesdash.infrastructure.persistence.sqlalchemy.repositories import (
    SqlAlchemyTransactionCatalog,
)
from salesdash.presentation.api.exception_handlers import setup_exception_handlers
from salesdash.presentation.api.routers import (
    analytics_router,
    seed_router,
    transactions_router,
)
from salesdash.presentation.api.schemas import HealthResponse
from salesdash_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Console output with timestamps and module names, the configured level
    for salesdash modules and WARNING for noisy third-party libraries.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("salesdash").setLevel(log_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__

OPENAPI_TAGS = [
    {
        "name": "Transactions",
        "description": """Product transaction listings.

- `/transactions` - search across all months
- `/products` - one month-of-year, optionally searched

Both are paginated with `page` and `perPage`.
""",
    },
    {
        "name": "Analytics",
        "description": """Month-scoped dashboard data.

`month` accepts an English month name (`March`) or a number (`3`) and
matches that month in every year.

- `/statistics` - sale amount, sold and unsold counts
- `/bar-chart` - record count per price range
- `/pie-chart` - record count per category
- `/combined` - all three at once
""",
    },
    {
        "name": "Database",
        "description": "Seeding the catalog from the remote dataset.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Builds engine, schema and catalog on startup; disposes the engine
    and its connection pool on shutdown.
    """
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)

    engine = create_engine(settings.sqlalchemy_url, echo=settings.database_echo)
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        await engine.dispose()
        raise SystemExit(1) from None

    app.state.catalog = SqlAlchemyTransactionCatalog(create_session_maker(engine))
    logger.info("Catalog ready (%s)", settings.database_type)

    yield

    logger.info("Shutting down %s API...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Sales dashboard backend: **monthly statistics**, **price range** "
            "and **category** charts over a seeded product transaction catalog."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(seed_router, tags=["Database"])
    app.include_router(transactions_router, tags=["Transactions"])
    app.include_router(analytics_router, tags=["Analytics"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app


# Application instance for uvicorn
app = create_app()
