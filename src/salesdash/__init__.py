"""Salesdash - product transaction statistics and chart data service."""

__version__ = "1.0.0"
