"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── salesdash/
    │   ├── unit/              # Fast, isolated tests (in-memory catalog)
    │   └── integration/       # SQLite-backed catalog and HTTP API tests
    ├── external/              # Tests hitting the real seed dataset URL
    └── shared/                # Shared fixtures and utilities

Environment Variables:
    RUN_EXTERNAL=1       Run @pytest.mark.external tests
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-external       Run external tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from salesdash_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def _flag_enabled(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-external",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.external",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that run against a real (SQLite) database",
    )
    config.addinivalue_line(
        "markers",
        "external: Tests connecting to real external services (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip external tests unless explicitly enabled."""
    if config.getoption("--run-all") or _flag_enabled("RUN_ALL_TESTS"):
        return

    if config.getoption("--run-external") or _flag_enabled("RUN_EXTERNAL"):
        return

    skip_external = pytest.mark.skip(
        reason="External test - run with --run-external or RUN_EXTERNAL=1",
    )
    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if "external" in item_markers:
            item.add_marker(skip_external)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
