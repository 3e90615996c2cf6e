"""
repositories/question_like_repo.py
----------------------------------
Data access layer for question likes.
"""

from typing import Optional

from models.question import Question
from models.question_like import QuestionLike
from models.user import User
from repositories.base import BaseRepository


class QuestionLikeRepository(BaseRepository[QuestionLike]):
    """Repository for the question_likes join table."""

    model = QuestionLike

    def likers_for_question_id(self, question_id: int) -> Optional[list[User]]:
        """Users who liked a question, or None if nobody did."""
        sql = """
            SELECT users.*
            FROM question_likes
            JOIN users ON question_likes.user_id = users.id
            WHERE question_likes.question_id = ?;
        """
        return self._fetch_many(sql, (question_id,), User)

    def num_likes_for_question_id(self, question_id: int) -> int:
        sql = "SELECT COUNT(*) FROM question_likes WHERE question_id = ?;"
        return self._fetch_scalar(sql, (question_id,)) or 0

    def liked_questions_for_user_id(self, user_id: int) -> Optional[list[Question]]:
        """Questions a user liked, or None if they liked nothing."""
        sql = """
            SELECT questions.*
            FROM question_likes
            JOIN questions ON question_likes.question_id = questions.id
            WHERE question_likes.user_id = ?;
        """
        return self._fetch_many(sql, (user_id,), Question)

    def most_liked_questions(self, n: int) -> Optional[list[Question]]:
        """
        The `n` questions with the most likes, most liked first.
        Ties are ordered by question id.

        Raises:
            ValueError: If `n` is negative.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        sql = """
            SELECT questions.*
            FROM question_likes
            JOIN questions ON question_likes.question_id = questions.id
            GROUP BY questions.id
            ORDER BY COUNT(*) DESC, questions.id
            LIMIT ?;
        """
        return self._fetch_many(sql, (n,), Question)
