"""
Shared pytest fixtures.

Every test gets a fresh in-memory database with the schema created,
so tests never touch the file named by QUESTIONS_DB_PATH.
"""

import sqlite3

import pytest

from db.connection import open_connection
from db.init_db import create_tables
from models import Question, QuestionFollow, QuestionLike, User
from repositories import (
    QuestionFollowRepository,
    QuestionLikeRepository,
    QuestionRepository,
    ReplyRepository,
    UserRepository,
)


# ============================================================
# Database fixtures
# ============================================================


@pytest.fixture
def conn() -> sqlite3.Connection:
    connection = open_connection(":memory:")
    create_tables(connection)
    yield connection
    connection.close()


# ============================================================
# Repository fixtures
# ============================================================


@pytest.fixture
def user_repo(conn) -> UserRepository:
    return UserRepository(conn)


@pytest.fixture
def question_repo(conn) -> QuestionRepository:
    return QuestionRepository(conn)


@pytest.fixture
def reply_repo(conn) -> ReplyRepository:
    return ReplyRepository(conn)


@pytest.fixture
def follow_repo(conn) -> QuestionFollowRepository:
    return QuestionFollowRepository(conn)


@pytest.fixture
def like_repo(conn) -> QuestionLikeRepository:
    return QuestionLikeRepository(conn)


# ============================================================
# Pre-created records
# ============================================================


@pytest.fixture
def alice(user_repo) -> User:
    return user_repo.save(User(fname="Alice", lname="Liddell"))


@pytest.fixture
def bob(user_repo) -> User:
    return user_repo.save(User(fname="Bob", lname="Builder"))


@pytest.fixture
def carol(user_repo) -> User:
    return user_repo.save(User(fname="Carol", lname="Danvers"))


@pytest.fixture
def question(question_repo, alice) -> Question:
    return question_repo.save(
        Question(title="Why SQLite?", body="Is it enough for a forum?", author_id=alice.id)
    )


@pytest.fixture
def follow(follow_repo):
    """Factory: follow(user, question) stores one follow edge."""
    def _follow(user: User, q: Question) -> QuestionFollow:
        return follow_repo.save(QuestionFollow(follower_id=user.id, question_id=q.id))
    return _follow


@pytest.fixture
def like(like_repo):
    """Factory: like(user, question) stores one like edge."""
    def _like(user: User, q: Question) -> QuestionLike:
        return like_repo.save(QuestionLike(user_id=user.id, question_id=q.id))
    return _like
