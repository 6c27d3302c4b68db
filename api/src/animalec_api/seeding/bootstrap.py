"""Startup bootstrap: seed every configured collection from its snapshot.

Sources run one after another in declared order. Whatever happens to one
source, the next one is attempted, and the run always returns a report.
"""

from __future__ import annotations

import logging
from typing import Sequence

from animalec_api.config import SeedSettings

from .errors import SeedParseError, SeedSourceSkipped
from .loader import load_seed_file
from .outcomes import BootstrapReport, SeedOutcome
from .reconcile import reconcile_collection
from .sources import SEED_SOURCES, SeedSource
from .store import DocumentStore

logger = logging.getLogger(__name__)


def seed_source(store: DocumentStore, source: SeedSource, settings: SeedSettings) -> SeedOutcome:
    path = source.path_in(settings.seed_dir)
    try:
        records = load_seed_file(path)
    except SeedSourceSkipped as exc:
        logger.warning(str(exc), extra={"collection": source.name, "reason": exc.reason})
        return SeedOutcome.skipped(source.name, exc.reason)
    except SeedParseError as exc:
        logger.error("Error seeding collection", extra={"collection": source.name, "error": str(exc)})
        return SeedOutcome.failure(source.name, str(exc))
    except Exception as exc:  # noqa: BLE001 - one source must not stop the others
        logger.exception("Error seeding collection", extra={"collection": source.name})
        return SeedOutcome.failure(source.name, str(exc) or type(exc).__name__)

    try:
        return reconcile_collection(store, source, records, force_reset=settings.force_reseed)
    except Exception as exc:  # noqa: BLE001 - one source must not stop the others
        logger.exception("Error seeding collection", extra={"collection": source.name})
        return SeedOutcome.failure(source.name, str(exc) or type(exc).__name__)


def log_report(report: BootstrapReport) -> None:
    logger.info(
        "Bootstrap summary",
        extra={
            "successful": len(report.successful),
            "skipped": len(report.skipped),
            "errors": len(report.errors),
        },
    )
    for outcome in report.outcomes:
        if outcome.partial:
            logger.warning(
                "Collection seeded with record errors",
                extra={"collection": outcome.source, "failed": outcome.failed},
            )
    for outcome in report.errors:
        logger.error("Collection failed", extra={"collection": outcome.source, "error": outcome.error})


def run_bootstrap(
    store: DocumentStore,
    settings: SeedSettings,
    sources: Sequence[SeedSource] = SEED_SOURCES,
) -> BootstrapReport:
    """Seed ``sources`` in order and return the run report. Never raises."""
    report = BootstrapReport()
    try:
        logger.info("Starting database bootstrap", extra={"seed_dir": str(settings.seed_dir)})
        if settings.force_reseed:
            logger.warning("FORCE_RESEED enabled, populated collections will be cleared and reseeded")

        for source in sources:
            report.add(seed_source(store, source, settings))

        log_report(report)
        logger.info("Database bootstrap completed")
    except Exception:  # noqa: BLE001 - startup must go on without seed data
        logger.exception("Database bootstrap aborted")
    return report
