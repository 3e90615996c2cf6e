"""
Connection provider tests.
"""

import sqlite3

import pytest

from db import connection
from db.init_db import create_tables
from models import User
from repositories import UserRepository


@pytest.fixture
def shared_connection(tmp_path):
    connection.init_connection(str(tmp_path / "questions.db"))
    yield connection.get_connection()
    connection.close_connection()


def test_rows_are_keyed_by_name():
    conn = connection.open_connection(":memory:")
    try:
        row = conn.execute("SELECT 1 AS answer").fetchone()
        assert row["answer"] == 1
    finally:
        conn.close()


def test_get_connection_before_init_raises():
    connection.close_connection()
    with pytest.raises(RuntimeError):
        connection.get_connection()


def test_init_connection_is_idempotent(shared_connection, tmp_path):
    connection.init_connection(str(tmp_path / "other.db"))
    assert connection.get_connection() is shared_connection


def test_repositories_default_to_shared_connection(shared_connection):
    create_tables()
    repo = UserRepository()
    assert repo.conn is shared_connection

    user = repo.save(User(fname="Shared", lname="Conn"))
    assert UserRepository(shared_connection).find_by_id(user.id) == user


def test_unopenable_file_is_fatal(tmp_path):
    with pytest.raises(sqlite3.Error):
        connection.open_connection(str(tmp_path / "missing_dir" / "questions.db"))
