"""FastAPI dependency injection for the Salesdash API.

The catalog is created once in the application lifespan and stored on
``app.state``; request handlers receive it through ``CatalogDep``.
"""

from typing import Annotated

from fastapi import Depends, Request

from salesdash.application.ports.seed import SeedSourcePort
from salesdash.domain.catalog import TransactionCatalog
from salesdash.infrastructure.seed import HttpSeedSource
from salesdash_config.settings import Settings, get_settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()


def get_catalog(request: Request) -> TransactionCatalog:
    return request.app.state.catalog


def get_seed_source(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> SeedSourcePort:
    return HttpSeedSource(
        url=settings.seed_source_url,
        timeout=settings.seed_source_timeout,
    )


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
CatalogDep = Annotated[TransactionCatalog, Depends(get_catalog)]
SeedSourceDep = Annotated[SeedSourcePort, Depends(get_seed_source)]
