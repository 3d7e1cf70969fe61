"""Infrastructure adapters (database, remote seed source)."""
