"""
db/connection.py
----------------
Manages the SQLite connection to the questions database.
Connections return rows as sqlite3.Row (accessible by column name)
and translate declared column types on read.
"""

import sqlite3
from typing import Optional

from config import DB_DETECT_TYPES, DB_PATH
from utils.logger import get_logger

logger = get_logger(__name__)

_conn: Optional[sqlite3.Connection] = None


def open_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Open a new configured connection to the database file.

    Args:
        db_path: Path of the SQLite file (defaults to ``DB_PATH``).
            ``":memory:"`` opens a private in-memory database.

    Returns:
        A sqlite3.Connection with ``row_factory`` set to sqlite3.Row.

    Raises:
        sqlite3.Error: If the database file cannot be opened.
    """
    path = db_path or DB_PATH
    detect_types = sqlite3.PARSE_DECLTYPES if DB_DETECT_TYPES else 0
    try:
        conn = sqlite3.connect(path, detect_types=detect_types)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON;")
    except sqlite3.Error as e:
        logger.error(f"Failed to open database {path}: {e}")
        raise
    logger.info(f"Opened database connection to {path}.")
    return conn


def init_connection(db_path: Optional[str] = None) -> None:
    """
    Open the process-wide connection. Calling it again is a no-op.

    Raises:
        sqlite3.Error: If the database file cannot be opened.
    """
    global _conn
    if _conn is not None:
        return
    _conn = open_connection(db_path)


def get_connection() -> sqlite3.Connection:
    """
    Get the process-wide connection.

    Raises:
        RuntimeError: If the connection has not been initialized.
    """
    if _conn is None:
        raise RuntimeError("Database connection not initialized. Call init_connection() first.")
    return _conn


def close_connection() -> None:
    """Close the process-wide connection."""
    global _conn
    if _conn is not None:
        _conn.close()
        _conn = None
        logger.info("Database connection closed.")
