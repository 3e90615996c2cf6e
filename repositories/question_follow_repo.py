"""
repositories/question_follow_repo.py
------------------------------------
Data access layer for question follows.
Joins across `question_follows`, `users` and `questions` live here.
"""

from typing import Optional

from models.question import Question
from models.question_follow import QuestionFollow
from models.user import User
from repositories.base import BaseRepository


class QuestionFollowRepository(BaseRepository[QuestionFollow]):
    """Repository for the question_follows join table."""

    model = QuestionFollow

    def followers_for_question_id(self, question_id: int) -> Optional[list[User]]:
        """
        Users following a question.

        Returns:
            List of User objects, or None if nobody follows it.
        """
        sql = """
            SELECT users.*
            FROM question_follows
            JOIN users ON question_follows.follower_id = users.id
            WHERE question_follows.question_id = ?;
        """
        return self._fetch_many(sql, (question_id,), User)

    def followed_questions_for_user_id(self, user_id: int) -> Optional[list[Question]]:
        """
        Questions a user follows.

        Returns:
            List of Question objects, or None if the user follows nothing.
        """
        sql = """
            SELECT questions.*
            FROM question_follows
            JOIN questions ON question_follows.question_id = questions.id
            WHERE question_follows.follower_id = ?;
        """
        return self._fetch_many(sql, (user_id,), Question)

    def most_followed_questions(self, n: int) -> Optional[list[Question]]:
        """
        The `n` questions with the most followers, most followed first.
        Ties are ordered by question id.

        Raises:
            ValueError: If `n` is negative.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        sql = """
            SELECT questions.*
            FROM question_follows
            JOIN questions ON question_follows.question_id = questions.id
            GROUP BY questions.id
            ORDER BY COUNT(*) DESC, questions.id
            LIMIT ?;
        """
        return self._fetch_many(sql, (n,), Question)
