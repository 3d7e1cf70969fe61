"""API tests for /initialize-database and /health."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from salesdash import __version__
from salesdash.presentation.api.dependencies import get_seed_source
from tests.shared.fixtures.seed import FailingSeedSource


class TestInitializeDatabase:
    def test_seeds_catalog(self, test_client, seed_records):
        response = test_client.get("/initialize-database")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Database initialized with seed data",
            "inserted": len(seed_records),
        }

        listed = test_client.get("/transactions", params={"perPage": "100"})
        assert listed.json()["pagination"]["totalItems"] == len(seed_records)

    def test_second_initialization_duplicates(self, test_client, seed_records):
        test_client.get("/initialize-database")
        test_client.get("/initialize-database")

        listed = test_client.get("/transactions")
        assert listed.json()["pagination"]["totalItems"] == 2 * len(seed_records)

    def test_logs_inserted_count(self, test_client, seed_records):
        with patch("salesdash.presentation.api.routers.seed.logger") as logger:
            test_client.get("/initialize-database")

        logger.debug.assert_called_once()
        assert logger.debug.call_args.args[1:] == (
            len(seed_records),
            len(seed_records),
        )

    def test_seed_failure_returns_500(self, app):
        app.dependency_overrides[get_seed_source] = FailingSeedSource

        with TestClient(app) as client:
            response = client.get("/initialize-database")

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to initialize database",
            "code": "SEED_SOURCE_FAILED",
        }


class TestHealth:
    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}
