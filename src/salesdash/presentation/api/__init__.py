"""HTTP API for the sales dashboard."""
