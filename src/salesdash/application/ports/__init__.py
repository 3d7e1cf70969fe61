"""Application ports (outbound interfaces implemented by infrastructure)."""

from salesdash.application.ports.seed import SeedSourcePort

__all__ = ["SeedSourcePort"]
