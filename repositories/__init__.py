"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive raw rows from the database and return domain model objects.
"""

from repositories.base import (
    AlreadyPersistedError,
    BaseRepository,
    InvariantViolationError,
    NotPersistedError,
    table_name_for,
)
from repositories.question_follow_repo import QuestionFollowRepository
from repositories.question_like_repo import QuestionLikeRepository
from repositories.question_repo import QuestionRepository
from repositories.reply_repo import ReplyRepository
from repositories.user_repo import UserRepository

__all__ = [
    "AlreadyPersistedError",
    "BaseRepository",
    "InvariantViolationError",
    "NotPersistedError",
    "table_name_for",
    "QuestionFollowRepository",
    "QuestionLikeRepository",
    "QuestionRepository",
    "ReplyRepository",
    "UserRepository",
]
