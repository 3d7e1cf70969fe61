"""Seed commands."""

from salesdash.application.commands.seed.initialize_database_command import (
    InitializeDatabaseCommand,
    SeedResult,
)

__all__ = ["InitializeDatabaseCommand", "SeedResult"]
