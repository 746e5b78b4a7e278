"""HTTP routes for users and posts, and the server entry point."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Optional

from flask import Flask, Response, jsonify, request

from crowboard.models import Post, User
from crowboard.store import Store, seeded_store

DEFAULT_PORT = 18080
DEFAULT_HOST = "0.0.0.0"
TEMPLATE_DIR = "templates"


def _text(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype="text/plain")


def _load_json() -> Optional[Any]:
    """Parse the request body as JSON, or return None if it is not JSON."""
    try:
        return json.loads(request.get_data(as_text=True))
    except ValueError:
        return None


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError("value is not a string")
    return value


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("value is not an integer")
    return value


def create_app(store: Optional[Store] = None) -> Flask:
    """Build the application serving ``store`` (a seeded store if None)."""
    if store is None:
        store = seeded_store()

    app = Flask(__name__)
    app.config["store"] = store

    @app.get("/")
    def index() -> Response:
        # A missing page yields an empty body rather than an error.
        page = Path(TEMPLATE_DIR) / "index.html"
        try:
            body = page.read_text(encoding="utf-8")
        except OSError:
            body = ""
        return Response(body, status=200, mimetype="text/html")

    # USERS
    @app.post("/users")
    def create_user() -> Any:
        body = _load_json()
        if not isinstance(body, dict) or "name" not in body:
            return _text("Missing 'name' field", 400)
        name = _string(body["name"])
        with store.lock:
            user_id = store.next_post_id()
            store.users[user_id] = User(user_id, name)
        return jsonify({"id": user_id, "name": name})

    @app.get("/users")
    def list_users() -> Any:
        with store.lock:
            users = [store.users[key].to_json() for key in sorted(store.users)]
        return jsonify(users)

    @app.get("/users/<int(signed=True):user_id>")
    def get_user(user_id: int) -> Any:
        with store.lock:
            user = store.users.get(user_id)
            if user is None:
                return _text("User not found", 404)
            return jsonify(user.to_json())

    @app.put("/users/<int(signed=True):user_id>")
    def update_user(user_id: int) -> Any:
        with store.lock:
            user = store.users.get(user_id)
            if user is None:
                return _text("User not found", 404)
            body = _load_json()
            if not isinstance(body, dict) or "name" not in body:
                return _text("Missing 'name' field", 400)
            user.name = _string(body["name"])
            return jsonify(user.to_json())

    # POSTS
    @app.post("/posts")
    def create_post() -> Any:
        body = _load_json()
        if not isinstance(body, dict) or not all(
            key in body for key in ("title", "content", "author_id")
        ):
            return _text("Missing required fields: title, content, author_id", 400)
        author_id = _integer(body["author_id"])
        title = _string(body["title"])
        content = _string(body["content"])
        with store.lock:
            if author_id not in store.users:
                return _text("Author not found", 400)
            post_id = store.next_post_id()
            post = Post(post_id, title, content, author_id)
            store.posts[post_id] = post
        return jsonify(post.to_json())

    @app.get("/posts")
    def list_posts() -> Any:
        with store.lock:
            posts = [store.posts[key].to_json() for key in sorted(store.posts)]
        return jsonify(posts)

    @app.get("/posts/<int(signed=True):post_id>")
    def get_post(post_id: int) -> Any:
        with store.lock:
            post = store.posts.get(post_id)
            if post is None:
                return _text("Post not found", 404)
            return jsonify(post.to_json())

    @app.put("/posts/<int(signed=True):post_id>")
    def update_post(post_id: int) -> Any:
        with store.lock:
            post = store.posts.get(post_id)
            if post is None:
                return _text("Post not found", 404)
            body = _load_json()
            if not isinstance(body, dict):
                return _text("Invalid JSON", 400)
            # Fields are applied in order; an unknown author stops the update
            # after title and content have already been changed.
            if "title" in body:
                post.title = _string(body["title"])
            if "content" in body:
                post.content = _string(body["content"])
            if "author_id" in body:
                author_id = _integer(body["author_id"])
                if author_id not in store.users:
                    return _text("Author not found", 400)
                post.author_id = author_id
            return jsonify(post.to_json())

    @app.delete("/posts/<int(signed=True):post_id>")
    def delete_post(post_id: int) -> Response:
        with store.lock:
            if store.posts.pop(post_id, None) is None:
                return _text("Post not found", 404)
        return Response(status=204)

    @app.get("/users/<int(signed=True):user_id>/posts")
    def user_posts(user_id: int) -> Any:
        with store.lock:
            if user_id not in store.users:
                return _text("User not found", 404)
            posts = [
                store.posts[key].to_json()
                for key in sorted(store.posts)
                if store.posts[key].author_id == user_id
            ]
        return jsonify(posts)

    return app


def main(argv: Optional[list[str]] = None) -> int:
    """Start the server on the seeded store."""
    parser = argparse.ArgumentParser(description="Serve the users and posts API.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="address to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    app = create_app(seeded_store())
    print("Crow Start!")
    app.run(host=args.host, port=args.port, threaded=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())