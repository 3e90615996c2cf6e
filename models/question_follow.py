"""
models/question_follow.py
-------------------------
Join model: one row is one (user, question) follow edge.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class QuestionFollow:
    follower_id: int
    question_id: int
    id: Optional[int] = None
