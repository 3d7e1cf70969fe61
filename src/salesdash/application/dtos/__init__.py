"""Data transfer objects returned by application queries and commands."""
