"""
models/reply.py
---------------
Domain model for replies. Replies form a tree per question:
a reply without a parent is a top-level reply.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Reply:
    """
    Represents a reply to a question or to another reply.

    Attributes:
        question_id: ID of the Question the thread belongs to.
        author_id: ID of the User who wrote the reply.
        body: Reply text.
        parent_id: ID of the parent Reply (None for top-level replies).
        id: Database primary key (None for new records).
    """
    question_id: int
    author_id: int
    body: str
    parent_id: Optional[int] = None
    id: Optional[int] = None

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    def __str__(self) -> str:
        target = f"question {self.question_id}" if self.is_top_level else f"reply {self.parent_id}"
        return f"#{self.id} on {target} by user {self.author_id}"
