"""Common pytest fixtures for seeder tests.

Every test gets its own in-memory SQLite store with a fresh schema, and a
temporary seed directory to drop snapshot files into.
"""

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, List, Tuple

import pytest
from sqlmodel import SQLModel

from animalec_api.config import SeedSettings
from animalec_api.db import create_db_engine
from animalec_api.seeding import DocumentStore, SeedDocument


class RecordingStore(DocumentStore):
    """DocumentStore that remembers every write it performs."""

    def __init__(self, engine) -> None:
        super().__init__(engine)
        self.writes: List[Tuple[str, str]] = []

    def delete_all(self, model) -> int:
        self.writes.append(("delete_all", model.__tablename__))
        return super().delete_all(model)

    def insert_if_absent(self, model, doc: SeedDocument) -> bool:
        self.writes.append(("insert", doc.id))
        return super().insert_if_absent(model, doc)


@pytest.fixture()
def store() -> Iterator[RecordingStore]:
    engine = create_db_engine("sqlite://")
    recording = RecordingStore(engine)
    recording.create_schema()
    yield recording
    SQLModel.metadata.drop_all(engine)
    recording.close()


@pytest.fixture()
def seed_dir(tmp_path: Path) -> Path:
    path = tmp_path / "seed"
    path.mkdir()
    return path


@pytest.fixture()
def write_seed(seed_dir: Path) -> Callable[[str, Any], Path]:
    def _write(collection: str, payload: Any) -> Path:
        path = seed_dir / f"animalec.{collection}.json"
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def settings(seed_dir: Path) -> SeedSettings:
    return SeedSettings(seed_dir=seed_dir)

