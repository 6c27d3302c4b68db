"""Store primitives the seeder needs from the database.

``DocumentStore`` is built once from an engine and passed explicitly to the
reconciler and orchestrator; nothing here reaches for a global connection.
"""

from __future__ import annotations

import logging
from typing import Iterable, Type

from sqlalchemy import delete, func
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, select

from shared_models import DocumentBase

from .documents import SeedDocument

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {"postgresql": pg_insert, "sqlite": sqlite_insert}


class DocumentStore:
    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def create_schema(self, models: Iterable[Type[DocumentBase]] | None = None) -> None:
        tables = [model.__table__ for model in models] if models is not None else None
        SQLModel.metadata.create_all(self.engine, tables=tables)

    def count(self, model: Type[DocumentBase]) -> int:
        with Session(self.engine) as session:
            return session.exec(select(func.count()).select_from(model)).one()

    def delete_all(self, model: Type[DocumentBase]) -> int:
        with Session(self.engine) as session:
            result = session.exec(delete(model))
            session.commit()
            return result.rowcount

    def insert_if_absent(self, model: Type[DocumentBase], doc: SeedDocument) -> bool:
        """Insert ``doc`` unless a row with the same id exists.

        Returns True when a row was written. An existing row is never
        modified.
        """
        insert_factory = _UPSERT_DIALECTS.get(self.engine.dialect.name)
        if insert_factory is None:
            return self._get_then_insert(model, doc)

        table = model.__table__
        stmt = insert_factory(table).values(**doc.to_row())
        stmt = stmt.on_conflict_do_nothing(index_elements=[table.c.id])
        with Session(self.engine) as session:
            result = session.exec(stmt)
            session.commit()
            return result.rowcount > 0

    def _get_then_insert(self, model: Type[DocumentBase], doc: SeedDocument) -> bool:
        with Session(self.engine) as session:
            if session.get(model, doc.id) is not None:
                return False
            session.add(model(**doc.to_row()))
            session.commit()
            return True

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Store closed", extra={"dialect": self.engine.dialect.name})
