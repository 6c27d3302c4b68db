"""Tables backing the platform collections.

Every collection shares the same document layout; only the table name
differs. Table names match the collection names used by the snapshots.
"""

from .base import DocumentBase


class Animal(DocumentBase, table=True):
    __tablename__ = "animals"


class User(DocumentBase, table=True):
    __tablename__ = "users"


class UserLevel(DocumentBase, table=True):
    __tablename__ = "user_levels"


class Expert(DocumentBase, table=True):
    __tablename__ = "experts"


class Sponsor(DocumentBase, table=True):
    __tablename__ = "sponsors"


class Question(DocumentBase, table=True):
    __tablename__ = "questions"


class Quiz(DocumentBase, table=True):
    __tablename__ = "quizzes"
