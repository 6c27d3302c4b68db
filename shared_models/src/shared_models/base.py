from datetime import datetime
from typing import Any, Dict

from sqlalchemy import JSON, DateTime, Text, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests).
DocumentJSON = JSON().with_variant(JSONB(), "postgresql")


class BaseModel(SQLModel, table=False):
    """Abstract base for ORM models with audit timestamps."""

    # Use per-model columns via sa_type + sa_column_kwargs to avoid reusing
    # the same SQLAlchemy Column instance across multiple tables.
    created_at: datetime | None = Field(
        default=None,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"server_default": func.now(), "nullable": True},
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={
            "server_default": func.now(),
            "onupdate": func.now(),
            "nullable": True,
        },
    )


class DocumentBase(BaseModel, table=False):
    """Schemaless collection row keyed by the snapshot identifier.

    ``document`` holds the whole normalized record, including the identifier
    field itself, so the original shape can be served back unchanged.
    """

    id: str = Field(primary_key=True, sa_type=Text)
    document: Dict[str, Any] = Field(default_factory=dict, sa_type=DocumentJSON)
