"""Persistence of users in the SQLite database."""

from __future__ import annotations

import sqlite3
from typing import Optional

from crowboard.database import DatabaseConnection
from crowboard.models import User


class UserRepository:
    """Reads and writes users through a ``DatabaseConnection``."""

    def __init__(self, db: DatabaseConnection) -> None:
        self._db = db

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with ``user_id``, or None."""

        def query(conn: sqlite3.Connection) -> Optional[User]:
            row = conn.execute(
                "SELECT id, name FROM users WHERE id = ?", (user_id,)
            ).fetchone()
            return User(*row) if row else None

        return self._db.execute(query)

    def find_all(self) -> list[User]:
        """Return every user ordered by id."""
        return self._db.execute(
            lambda conn: [
                User(*row) for row in conn.execute("SELECT id, name FROM users ORDER BY id")
            ]
        )

    def create(self, user: User) -> int:
        """Insert ``user`` by name and return the id the database gave it."""

        def insert(conn: sqlite3.Connection) -> int:
            cursor = conn.execute("INSERT INTO users (name) VALUES (?)", (user.name,))
            if cursor.rowcount < 1 or cursor.lastrowid is None:
                raise RuntimeError("Failed to create user")
            return cursor.lastrowid

        return self._db.execute(insert)

    def update(self, user: User) -> bool:
        """Rename the stored user with ``user.id``; True if a row changed."""
        return self._db.execute(
            lambda conn: conn.execute(
                "UPDATE users SET name = ? WHERE id = ?", (user.name, user.id)
            ).rowcount
            > 0
        )

    def delete_by_id(self, user_id: int) -> bool:
        """Delete the user with ``user_id``; True if a row was removed."""
        return self._db.execute(
            lambda conn: conn.execute("DELETE FROM users WHERE id = ?", (user_id,)).rowcount
            > 0
        )

    def count(self) -> int:
        """Return the number of stored users."""
        return self._db.execute(
            lambda conn: conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]
        )