"""Command-line adapters for local operations."""
