"""
models/question.py
------------------
Domain model for questions posted to the forum.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Question:
    """
    Represents a single question.

    Attributes:
        title: Short headline.
        body: Full question text.
        author_id: ID of the User who asked it.
        id: Database primary key (None for new records).
    """
    title: str
    body: str
    author_id: int
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.id} {self.title} (by user {self.author_id})"
