"""HTTP API for creating and listing customers, backed by a SQL database."""

__version__ = "1.0.0"