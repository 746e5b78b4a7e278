"""In-memory storage shared by the HTTP handlers."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from crowboard.models import Post, User


@dataclass
class Store:
    """Users and posts held in memory, with their id counters."""

    users: dict[int, User] = field(default_factory=dict)
    posts: dict[int, Post] = field(default_factory=dict)
    user_id_count: int = 0
    post_id_count: int = 0
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def next_post_id(self) -> int:
        """Advance the post id counter and return the new value."""
        with self.lock:
            self.post_id_count += 1
            return self.post_id_count


def seeded_store() -> Store:
    """Return a store preloaded with the initial users and posts."""
    store = Store()
    for user in (
        User(1, "Alice Smith"),
        User(2, "Bob Johnson"),
        User(3, "Charlie Brown"),
    ):
        store.users[user.id] = user
    store.user_id_count = 3

    for post in (
        Post(101, "Modern C++", "C++20/23 Features", 1),
        Post(102, "Concurrency", "Threads and async", 2),
        Post(103, "Modules", "C++20 Modules", 1),
    ):
        store.posts[post.id] = post
    store.post_id_count = 103
    return store