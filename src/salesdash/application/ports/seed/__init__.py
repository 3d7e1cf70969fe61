"""Seed source port."""

from salesdash.application.ports.seed.seed_source_port import SeedSourcePort

__all__ = ["SeedSourcePort"]
