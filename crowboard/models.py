"""Domain records for users and posts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class User:
    """A registered user."""

    id: int = 0
    name: str = ""

    def to_json(self) -> dict[str, Any]:
        """Return the user as a JSON-ready mapping."""
        return {"id": self.id, "name": self.name}


@dataclass
class Post:
    """A post written by a user."""

    id: int = 0
    title: str = ""
    content: str = ""
    author_id: int = 0

    def to_json(self) -> dict[str, Any]:
        """Return the post as a JSON-ready mapping."""
        return {
            "id_": self.id,
            "title_": self.title,
            "content_": self.content,
            "author_id_": self.author_id,
        }