"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── SQLite ────────────────────────────────────────────────
DB_PATH: str = os.getenv("QUESTIONS_DB_PATH", "questions.db")

# Translate declared column types (INTEGER, TEXT, ...) on read
DB_DETECT_TYPES: bool = os.getenv("QUESTIONS_DB_DETECT_TYPES", "1").lower() not in ("0", "false", "no")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Optional log file in addition to stdout
LOG_FILE: str = os.getenv("LOG_FILE", "")
