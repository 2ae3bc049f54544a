"""Project Board: validated project records in an observable in-memory store."""

__version__ = "0.1.0"
