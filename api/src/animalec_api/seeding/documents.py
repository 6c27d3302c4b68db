from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import TypeAdapter
from sqlmodel import SQLModel

from .errors import SeedRecordError

_document_adapter = TypeAdapter(Dict[str, Any])


class SeedDocument(SQLModel):
    """Typed row built from a normalized record at the store-write boundary."""

    id: str
    document: Dict[str, Any]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any], key_field: str = "_id") -> "SeedDocument":
        if key_field not in record or record[key_field] is None:
            raise SeedRecordError(f"Record has no '{key_field}' value")
        key = record[key_field]
        if isinstance(key, (dict, list)):
            raise SeedRecordError(f"Record '{key_field}' must be a scalar, got {type(key).__name__}")

        created_at = record.get("createdAt")
        updated_at = record.get("updatedAt")
        return cls(
            id=str(key),
            # Dates are stored as ISO strings inside the JSON document.
            document=_document_adapter.dump_python(record, mode="json"),
            created_at=created_at if isinstance(created_at, datetime) else None,
            updated_at=updated_at if isinstance(updated_at, datetime) else None,
        )

    def to_row(self) -> Dict[str, Any]:
        row: Dict[str, Any] = {"id": self.id, "document": self.document}
        # Leave unset timestamps to the server defaults.
        if self.created_at is not None:
            row["created_at"] = self.created_at
        if self.updated_at is not None:
            row["updated_at"] = self.updated_at
        return row
