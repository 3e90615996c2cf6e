"""
models/ - Domain Models
========================
Plain dataclasses, one per table. Each instance owns its scalar fields;
relationships are resolved by the repositories, never held as references.
"""

from models.question import Question
from models.question_follow import QuestionFollow
from models.question_like import QuestionLike
from models.reply import Reply
from models.user import User

__all__ = ["User", "Question", "Reply", "QuestionFollow", "QuestionLike"]
