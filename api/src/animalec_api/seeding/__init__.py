"""Idempotent seeding of the platform collections from JSON snapshots."""

from .bootstrap import run_bootstrap, seed_source
from .documents import SeedDocument
from .errors import (
    SeedError,
    SeedParseError,
    SeedRecordError,
    SeedSourceEmpty,
    SeedSourceMissing,
    SeedSourceSkipped,
)
from .loader import load_seed_file
from .normalize import normalize_record, normalize_value
from .outcomes import BootstrapReport, SeedOutcome, SeedStatus
from .reconcile import reconcile_collection
from .sources import SEED_SOURCES, SeedSource, select_sources
from .store import DocumentStore

__all__ = [
    "BootstrapReport",
    "DocumentStore",
    "SEED_SOURCES",
    "SeedDocument",
    "SeedError",
    "SeedOutcome",
    "SeedParseError",
    "SeedRecordError",
    "SeedSource",
    "SeedSourceEmpty",
    "SeedSourceMissing",
    "SeedSourceSkipped",
    "SeedStatus",
    "load_seed_file",
    "normalize_record",
    "normalize_value",
    "reconcile_collection",
    "run_bootstrap",
    "seed_source",
    "select_sources",
]
