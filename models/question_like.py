"""
models/question_like.py
-----------------------
Join model: one row is one (user, question) like edge.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class QuestionLike:
    user_id: int
    question_id: int
    id: Optional[int] = None
