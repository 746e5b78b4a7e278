"""In-memory JSON HTTP service for users and posts, with a SQLite user repository."""

__version__ = "1.0.0"
__all__ = ["__version__"]