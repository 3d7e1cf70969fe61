"""Pytest fixtures for API integration tests.

Each test gets a FastAPI app on its own SQLite file. The remote seed
dataset is replaced by a static in-process source.
"""

import pytest
from fastapi.testclient import TestClient

from salesdash.domain.catalog import ProductTransaction
from salesdash.presentation.api.app import create_app
from salesdash.presentation.api.dependencies import get_seed_source
from salesdash_config.settings import Settings
from tests.shared.fixtures.database import sqlite_url
from tests.shared.fixtures.factories import RecordFactory
from tests.shared.fixtures.seed import StaticSeedSource


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings on a throwaway SQLite database."""
    return Settings(
        _env_file=None,
        database_url=sqlite_url(tmp_path),
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        default_per_page=10,
        max_per_page=100,
        log_level="WARNING",
    )


@pytest.fixture
def seed_records() -> list[ProductTransaction]:
    return RecordFactory.mixed_dataset()


@pytest.fixture
def app(api_settings, seed_records):
    app = create_app(api_settings)
    app.dependency_overrides[get_seed_source] = lambda: StaticSeedSource(seed_records)
    return app


@pytest.fixture
def test_client(app):
    """Client with the lifespan running (schema created, catalog attached)."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def seeded_client(test_client):
    """Client whose catalog holds the mixed dataset."""
    response = test_client.get("/initialize-database")
    assert response.status_code == 200
    return test_client
