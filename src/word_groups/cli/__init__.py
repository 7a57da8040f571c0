"""Command-line interface for word-groups."""
