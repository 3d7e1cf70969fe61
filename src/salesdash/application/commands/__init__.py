"""Application commands (write side)."""

from salesdash.application.commands.seed import InitializeDatabaseCommand, SeedResult

__all__ = ["InitializeDatabaseCommand", "SeedResult"]
