"""Thread-safe SQLite connection with the application schema."""

from __future__ import annotations

import logging
import sqlite3
import threading
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS posts (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        content TEXT NOT NULL,
        author_id INTEGER NOT NULL,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY (author_id) REFERENCES users(id) ON DELETE CASCADE
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_posts_author_id ON posts(author_id)",
)


class DatabaseConnection:
    """An SQLite database guarded by a lock; the schema is created on open."""

    def __init__(self, db_path: str) -> None:
        try:
            self._conn = sqlite3.connect(
                db_path, isolation_level=None, check_same_thread=False
            )
        except sqlite3.Error:
            logger.exception("Database connection failed: %s", db_path)
            raise
        self._lock = threading.RLock()
        logger.info("Connected to database: %s", db_path)
        try:
            self.initialize_schema()
        except sqlite3.Error:
            logger.exception("Database schema setup failed: %s", db_path)
            self._conn.close()
            raise

    def __enter__(self) -> DatabaseConnection:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def execute(self, func: Callable[[sqlite3.Connection], T]) -> T:
        """Run ``func`` with the connection while holding the lock."""
        with self._lock:
            return func(self._conn)

    def begin_transaction(self) -> None:
        """Start an explicit transaction."""
        self.execute(lambda db: db.execute("BEGIN TRANSACTION"))

    def commit(self) -> None:
        """Commit the current transaction."""
        self.execute(lambda db: db.execute("COMMIT"))

    def rollback(self) -> None:
        """Roll back the current transaction."""
        self.execute(lambda db: db.execute("ROLLBACK"))

    def initialize_schema(self) -> None:
        """Create the tables and indexes if they do not exist."""

        def create(db: sqlite3.Connection) -> None:
            for statement in _SCHEMA:
                db.execute(statement)

        self.execute(create)

    def close(self) -> None:
        """Close the underlying connection."""
        with self._lock:
            self._conn.close()