"""Infrastructure adapters: database, logging and settings."""
