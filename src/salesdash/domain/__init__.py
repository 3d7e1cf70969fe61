"""Domain layer: catalog records, query values and exceptions."""
