"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from models.question import Question
from models.reply import Reply
from models.user import User
from repositories.base import BaseRepository
from repositories.question_follow_repo import QuestionFollowRepository
from repositories.question_like_repo import QuestionLikeRepository
from repositories.question_repo import QuestionRepository
from repositories.reply_repo import ReplyRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for CRUD operations on the users table."""

    model = User

    def find_by_name(self, fname: str, lname: str) -> Optional[User]:
        """
        Fetch a user by first and last name.

        Returns:
            The first matching User or None.
        """
        sql = "SELECT * FROM users WHERE fname = ? AND lname = ?;"
        return self._fetch_one(sql, (fname, lname))

    # ── RELATIONSHIPS ─────────────────────────────────────

    def authored_questions(self, user: User) -> Optional[list[Question]]:
        return QuestionRepository(self._conn).find_by_author_id(user.id)

    def authored_replies(self, user: User) -> Optional[list[Reply]]:
        return ReplyRepository(self._conn).find_by_user_id(user.id)

    def followed_questions(self, user: User) -> Optional[list[Question]]:
        return QuestionFollowRepository(self._conn).followed_questions_for_user_id(user.id)

    def liked_questions(self, user: User) -> Optional[list[Question]]:
        return QuestionLikeRepository(self._conn).liked_questions_for_user_id(user.id)

    # ── AGGREGATES ────────────────────────────────────────

    def average_karma(self, user: User) -> float:
        """
        Likes received per authored question that has at least one like.

        Questions without likes do not count in the denominator, so one
        question with 4 likes and one with none gives 4, not 2.

        Returns:
            The ratio, or 0 if none of the user's questions has a like.
        """
        sql = """
            SELECT
                CAST(COUNT(question_likes.id) AS FLOAT)
                    / COUNT(DISTINCT question_likes.question_id)
            FROM questions
            LEFT OUTER JOIN question_likes ON questions.id = question_likes.question_id
            WHERE questions.author_id = ?;
        """
        karma = self._fetch_scalar(sql, (user.id,))
        logger.debug(f"average_karma for user {user.id}: {karma}")
        return float(karma) if karma is not None else 0.0
