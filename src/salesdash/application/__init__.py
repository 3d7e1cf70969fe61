"""Application layer: queries and commands over the transaction catalog."""
