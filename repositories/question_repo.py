"""
repositories/question_repo.py
-----------------------------
Data access layer for questions.
Relationship accessors re-query on every call; nothing is cached.
"""

from typing import Optional

from models.question import Question
from models.reply import Reply
from models.user import User
from repositories.base import BaseRepository
from repositories.question_follow_repo import QuestionFollowRepository
from repositories.question_like_repo import QuestionLikeRepository
from repositories.reply_repo import ReplyRepository


class QuestionRepository(BaseRepository[Question]):
    """Repository for CRUD operations on the questions table."""

    model = Question

    def find_by_author_id(self, author_id: int) -> Optional[list[Question]]:
        """
        Fetch all questions asked by a user.

        Returns:
            List of Question objects, or None if the user asked nothing.
        """
        sql = "SELECT * FROM questions WHERE author_id = ?;"
        return self._fetch_many(sql, (author_id,))

    # ── RELATIONSHIPS ─────────────────────────────────────

    def author(self, question: Question) -> Optional[User]:
        return self._lookup(User, question.author_id)

    def replies(self, question: Question) -> Optional[list[Reply]]:
        return ReplyRepository(self._conn).find_by_question_id(question.id)

    def followers(self, question: Question) -> Optional[list[User]]:
        return QuestionFollowRepository(self._conn).followers_for_question_id(question.id)

    def likers(self, question: Question) -> Optional[list[User]]:
        return QuestionLikeRepository(self._conn).likers_for_question_id(question.id)

    def num_likes(self, question: Question) -> int:
        return QuestionLikeRepository(self._conn).num_likes_for_question_id(question.id)

    # ── RANKINGS ──────────────────────────────────────────

    def most_followed(self, n: int) -> Optional[list[Question]]:
        return QuestionFollowRepository(self._conn).most_followed_questions(n)

    def most_liked(self, n: int) -> Optional[list[Question]]:
        return QuestionLikeRepository(self._conn).most_liked_questions(n)
