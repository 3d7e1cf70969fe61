"""Fixtures for SQLAlchemy catalog tests (SQLite file per test)."""

from tests.shared.fixtures.database import async_engine, sqlite_catalog

__all__ = ["async_engine", "sqlite_catalog"]
