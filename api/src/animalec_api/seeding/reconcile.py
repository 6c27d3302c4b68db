from __future__ import annotations

import logging
from typing import Any, Sequence

from .documents import SeedDocument
from .normalize import normalize_record
from .outcomes import SeedOutcome
from .sources import SeedSource
from .store import DocumentStore

logger = logging.getLogger(__name__)


def reconcile_collection(
    store: DocumentStore,
    source: SeedSource,
    records: Sequence[Any],
    force_reset: bool = False,
) -> SeedOutcome:
    """Insert the snapshot records that are absent from the collection.

    A populated collection is left alone unless ``force_reset`` is set, in
    which case it is emptied first. Records are written one at a time, in
    file order; a record that fails for any reason is logged and counted
    without stopping the rest. Store errors from the count or the reset
    propagate to the caller.
    """
    existing = store.count(source.model)
    if existing > 0 and not force_reset:
        logger.info(
            "Collection already seeded, skipping",
            extra={"collection": source.name, "existing": existing},
        )
        return SeedOutcome.skipped(source.name, "already seeded", existing=existing)

    if force_reset and existing > 0:
        cleared = store.delete_all(source.model)
        logger.warning("Collection cleared", extra={"collection": source.name, "cleared": cleared})

    inserted = 0
    unmodified = 0
    failed = 0
    for index, raw in enumerate(records):
        try:
            doc = SeedDocument.from_record(normalize_record(raw), key_field=source.key_field)
            if store.insert_if_absent(source.model, doc):
                inserted += 1
            else:
                unmodified += 1
        except Exception as exc:  # noqa: BLE001 - one record must not stop the others
            failed += 1
            logger.error(
                "Failed to upsert record",
                extra={"collection": source.name, "index": index, "error": str(exc)},
            )

    logger.info(
        "Collection seeded",
        extra={
            "collection": source.name,
            "inserted": inserted,
            "unmodified": unmodified,
            "failed": failed,
        },
    )
    return SeedOutcome.success(source.name, inserted, unmodified, failed)
