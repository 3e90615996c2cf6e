"""
models/user.py
--------------
Domain model for forum members.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a forum member.

    Attributes:
        fname: First name.
        lname: Last name.
        id: Database primary key (None for new records).
    """
    fname: str
    lname: str
    id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.fname} {self.lname}"

    def __str__(self) -> str:
        return f"#{self.id} {self.full_name}"
