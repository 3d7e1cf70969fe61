"""API routers."""

from salesdash.presentation.api.routers.analytics import router as analytics_router
from salesdash.presentation.api.routers.seed import router as seed_router
from salesdash.presentation.api.routers.transactions import (
    router as transactions_router,
)

__all__ = [
    "analytics_router",
    "seed_router",
    "transactions_router",
]
