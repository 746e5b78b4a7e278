# crowboard

A small JSON HTTP service, built on Flask, that keeps users and posts in
memory. The package also has a SQLite-backed user repository that can be
used on its own from Python.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Running the server

    crowboard

The command prints `Crow Start!` and serves on `0.0.0.0`, port 18080,
handling requests in threads. Both can be changed:

    crowboard --host 127.0.0.1 --port 8000

`python -m crowboard.api` does the same.

The server starts with three users (1 Alice Smith, 2 Bob Johnson,
3 Charlie Brown) and three posts (ids 101, 102, 103).

## Endpoints

- `GET /` returns `templates/index.html`, read from the current working
  directory, as HTML. If the file cannot be read the body is empty.

Users:

- `POST /users` with `{"name": ...}` creates a user and returns
  `{"id", "name"}`. New user ids are drawn from the same counter as post
  ids, so the first user created on a fresh server gets id 104.
- `GET /users` lists all users, ordered by id.
- `GET /users/<id>` returns one user, or 404 `User not found`.
- `PUT /users/<id>` with `{"name": ...}` renames a user; 404 if the user
  does not exist, 400 if the body has no `name`.

Posts:

- `POST /posts` with `{"title", "content", "author_id"}` creates a post.
  A missing field gives 400; an unknown author gives 400 `Author not found`.
- `GET /posts` lists all posts, ordered by id.
- `GET /posts/<id>` returns one post, or 404.
- `PUT /posts/<id>` updates any of `title`, `content`, `author_id`. The
  fields are applied in that order, so if the author is unknown the reply is
  400 but a new title or content in the same request has already been saved.
- `DELETE /posts/<id>` removes a post and answers 204, or 404.
- `GET /users/<id>/posts` lists the posts of one author, or 404 if the user
  does not exist.

Users are returned with the keys `id` and `name`; posts with the keys `id_`,
`title_`, `content_` and `author_id_`. Error replies are plain text. A body
that is not a JSON object gets a 400; a field of the wrong type (a name that
is not a string, an `author_id` that is not an integer) is an internal
server error.

## Using it from Python

    from crowboard.store import seeded_store
    from crowboard.api import create_app

    app = create_app(seeded_store())
    client = app.test_client()
    print(client.get("/users/1").get_json())

`create_app(store=None)` builds the Flask application around a
`crowboard.store.Store`, using a freshly seeded one if none is given.
`Store` holds `users` and `posts` dictionaries keyed by id, the counters
`user_id_count` and `post_id_count`, and a `lock`; `next_post_id()` advances
the post counter. `seeded_store()` returns a store that already holds the
starting users and posts.

`crowboard.models` defines the `User` and `Post` dataclasses; each has
`to_json()` giving the mapping the API returns.

### Users in SQLite

    from crowboard.database import DatabaseConnection
    from crowboard.models import User
    from crowboard.user_repository import UserRepository

    with DatabaseConnection("board.db") as db:
        users = UserRepository(db)
        new_id = users.create(User(name="Alice Smith"))
        print(users.find_by_id(new_id), users.count())

`DatabaseConnection(path)` opens the database and creates the `users` and
`posts` tables (and an index on the post author) if they are missing. Its
`execute(func)` calls `func` with the `sqlite3` connection while holding a
lock; it also has `begin_transaction`, `commit`, `rollback`,
`initialize_schema` and `close`, and works as a context manager that closes
the connection on exit.

`UserRepository` offers `find_by_id` (a `User` or `None`), `find_all`
(ordered by id), `create` (returns the new id, raises `RuntimeError` if no
row was inserted), `update` and `delete_by_id` (each `True` if a row
changed) and `count`.

## What it does not do

- The HTTP server keeps everything in memory: users and posts are lost when
  it stops, and it does not use the SQLite repository.
- There is no HTTP endpoint to delete a user.
- There is no repository for posts in SQLite; only the table is created.