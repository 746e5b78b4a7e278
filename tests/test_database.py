import sqlite3

import pytest

from crowboard.database import DatabaseConnection


@pytest.fixture
def db():
    connection = DatabaseConnection(":memory:")
    yield connection
    connection.close()


def _user_names(db):
    return db.execute(
        lambda conn: [row[0] for row in conn.execute("SELECT name FROM users ORDER BY id")]
    )


def test_schema_creates_tables_and_index(db):
    names = db.execute(
        lambda conn: {row[0] for row in conn.execute("SELECT name FROM sqlite_master")}
    )
    assert {"users", "posts", "idx_posts_author_id"} <= names


def test_initialize_schema_is_idempotent(db):
    db.execute(lambda conn: conn.execute("INSERT INTO users (name) VALUES ('Alice Smith')"))
    db.initialize_schema()
    assert _user_names(db) == ["Alice Smith"]


def test_execute_returns_callable_result(db):
    assert db.execute(lambda conn: conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]) == 0


def test_commit_keeps_changes(db):
    db.begin_transaction()
    db.execute(lambda conn: conn.execute("INSERT INTO users (name) VALUES ('Bob Johnson')"))
    db.commit()
    assert _user_names(db) == ["Bob Johnson"]


def test_rollback_discards_changes(db):
    db.begin_transaction()
    db.execute(lambda conn: conn.execute("INSERT INTO users (name) VALUES ('Bob Johnson')"))
    db.rollback()
    assert _user_names(db) == []


def test_commit_without_transaction_fails(db):
    with pytest.raises(sqlite3.OperationalError):
        db.commit()


def test_execute_after_close_fails():
    connection = DatabaseConnection(":memory:")
    connection.close()
    with pytest.raises(sqlite3.ProgrammingError):
        connection.execute(lambda conn: conn.execute("SELECT 1"))


def test_file_database_persists(tmp_path):
    path = str(tmp_path / "app.db")
    with DatabaseConnection(path) as first:
        first.execute(
            lambda conn: conn.execute("INSERT INTO users (name) VALUES ('Charlie Brown')")
        )
    with DatabaseConnection(path) as second:
        assert _user_names(second) == ["Charlie Brown"]


def test_bad_path_raises(tmp_path):
    with pytest.raises(sqlite3.OperationalError):
        DatabaseConnection(str(tmp_path / "missing" / "app.db"))