"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database file:
    python -m db.init_db
"""

import sqlite3
from typing import Optional

from db.connection import get_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: forum members
CREATE TABLE IF NOT EXISTS users (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    fname           TEXT NOT NULL,
    lname           TEXT NOT NULL
);

-- Questions table: every question is authored by one user
CREATE TABLE IF NOT EXISTS questions (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    title           TEXT NOT NULL,
    body            TEXT NOT NULL,
    author_id       INTEGER NOT NULL REFERENCES users(id)
);

-- Question follows: one row per (user, question) follow edge
CREATE TABLE IF NOT EXISTS question_follows (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    follower_id     INTEGER NOT NULL REFERENCES users(id),
    question_id     INTEGER NOT NULL REFERENCES questions(id)
);

-- Replies table: parent_id NULL marks a top-level reply
CREATE TABLE IF NOT EXISTS replies (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    question_id     INTEGER NOT NULL REFERENCES questions(id),
    parent_id       INTEGER REFERENCES replies(id),
    author_id       INTEGER NOT NULL REFERENCES users(id),
    body            TEXT NOT NULL
);

-- Question likes: one row per (user, question) like edge
CREATE TABLE IF NOT EXISTS question_likes (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id         INTEGER NOT NULL REFERENCES users(id),
    question_id     INTEGER NOT NULL REFERENCES questions(id)
);

CREATE INDEX IF NOT EXISTS idx_questions_author ON questions(author_id);
CREATE INDEX IF NOT EXISTS idx_follows_question ON question_follows(question_id);
CREATE INDEX IF NOT EXISTS idx_likes_question ON question_likes(question_id);
CREATE INDEX IF NOT EXISTS idx_replies_question ON replies(question_id);
"""


def create_tables(conn: Optional[sqlite3.Connection] = None) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Args:
        conn: Connection to use; defaults to the process-wide connection.
    """
    conn = conn or get_connection()
    try:
        conn.executescript(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except sqlite3.Error as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import init_connection, close_connection
    init_connection()
    create_tables()
    close_connection()
    print("Database schema created successfully.")
