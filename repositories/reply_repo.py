"""
repositories/reply_repo.py
--------------------------
Data access layer for replies and their thread structure.
"""

from typing import Optional

from models.question import Question
from models.reply import Reply
from models.user import User
from repositories.base import BaseRepository


class ReplyRepository(BaseRepository[Reply]):
    """Repository for CRUD operations on the replies table."""

    model = Reply

    def find_by_user_id(self, author_id: int) -> Optional[list[Reply]]:
        """Replies written by a user, or None if there are none."""
        sql = "SELECT * FROM replies WHERE author_id = ?;"
        return self._fetch_many(sql, (author_id,))

    def find_by_question_id(self, question_id: int) -> Optional[list[Reply]]:
        """Every reply in a question's thread, or None if there are none."""
        sql = "SELECT * FROM replies WHERE question_id = ?;"
        return self._fetch_many(sql, (question_id,))

    def author(self, reply: Reply) -> Optional[User]:
        return self._lookup(User, reply.author_id)

    def question(self, reply: Reply) -> Optional[Question]:
        return self._lookup(Question, reply.question_id)

    def parent_reply(self, reply: Reply) -> Optional[Reply]:
        """The reply this one answers; None for a top-level reply."""
        return self._lookup(Reply, reply.parent_id)

    def child_replies(self, reply: Reply) -> Optional[list[Reply]]:
        """Direct answers to a reply, or None if there are none."""
        if reply.id is None:
            return None
        sql = "SELECT * FROM replies WHERE parent_id = ?;"
        return self._fetch_many(sql, (reply.id,))
