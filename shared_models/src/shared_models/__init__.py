"""Shared SQLModel models package.

Place SQLModel ORM and validation models here to be reused across services.
"""

from .base import BaseModel, DocumentBase
from .tables import Animal, Expert, Question, Quiz, Sponsor, User, UserLevel

__all__ = [
    "BaseModel",
    "DocumentBase",
    "Animal",
    "User",
    "UserLevel",
    "Expert",
    "Sponsor",
    "Question",
    "Quiz",
]
