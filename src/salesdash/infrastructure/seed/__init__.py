"""Seed dataset adapters."""

from salesdash.infrastructure.seed.http_seed_source import HttpSeedSource, SeedRecord

__all__ = ["HttpSeedSource", "SeedRecord"]
