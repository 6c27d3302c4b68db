from __future__ import annotations

import argparse
import json
import os
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from animalec_api.config import SeedSettings
from animalec_api.db import build_database_url, create_db_engine
from animalec_api.logging_config import configure_logging

from .bootstrap import run_bootstrap
from .errors import SeedError, SeedSourceSkipped
from .loader import load_seed_file
from .normalize import normalize_record
from .sources import SEED_SOURCES, SeedSource, select_sources
from .store import DocumentStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seed the Animalec collections from JSON snapshot files")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL / POSTGRES_* settings")
    parser.add_argument("--seed-dir", default=None, help="Directory with animalec.<collection>.json files")
    parser.add_argument("--force", action="store_true", help="Clear populated collections and reseed them")
    parser.add_argument(
        "--only",
        action="append",
        default=None,
        metavar="COLLECTION",
        choices=[source.name for source in SEED_SOURCES],
        help="Seed only this collection (repeatable)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Do not touch the database, just show summary and samples")
    return parser


def _dry_run(sources: tuple[SeedSource, ...], settings: SeedSettings) -> int:
    errors = 0
    for source in sources:
        try:
            records = [normalize_record(raw) for raw in load_seed_file(source.path_in(settings.seed_dir))]
        except SeedSourceSkipped as exc:
            print(f"{source.name}: skipped ({exc.reason})")
            continue
        except SeedError as exc:
            errors += 1
            print(f"{source.name}: {exc}")
            continue
        print(f"{source.name}: {len(records)} records prepared")
        for sample in records[: min(3, len(records))]:
            body = json.dumps(sample, ensure_ascii=False, default=str)
            print(body[:500] + ("..." if len(body) > 500 else ""))
    return 1 if errors else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(service_name=os.getenv("LOG_SERVICE_NAME", "seeder"))

    settings = SeedSettings.from_env()
    if args.seed_dir:
        settings = replace(settings, seed_dir=Path(args.seed_dir).expanduser())
    if args.force:
        settings = replace(settings, force_reseed=True)
    sources = select_sources(args.only) if args.only else SEED_SOURCES

    if args.dry_run:
        return _dry_run(sources, settings)

    store = DocumentStore(create_db_engine(args.database_url or build_database_url()))
    try:
        store.create_schema(source.model for source in sources)
        report = run_bootstrap(store, settings, sources)
    finally:
        store.close()
    return 0 if report.ok else 1
