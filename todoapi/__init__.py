"""HTTP service for managing todo items with a database-backed maintenance switch."""

__version__ = "0.1.0"