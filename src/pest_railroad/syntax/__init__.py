"""Parse tree types."""
