import logging
from dataclasses import replace

import pytest
from sqlalchemy.exc import OperationalError

from animalec_api.seeding import SEED_SOURCES, SeedStatus, run_bootstrap, seed_source
from animalec_api.seeding.sources import SeedSource, select_sources
from factories import export_records
from shared_models import Animal, Expert, Sponsor, User


def test_sources_are_declared_in_seeding_order() -> None:
    assert [s.name for s in SEED_SOURCES] == [
        "animals",
        "users",
        "user_levels",
        "experts",
        "sponsors",
        "questions",
        "quizzes",
    ]
    assert SEED_SOURCES[0].filename == "animalec.animals.json"
    assert all(s.key_field == "_id" for s in SEED_SOURCES)


def test_select_sources_keeps_declared_order() -> None:
    assert [s.name for s in select_sources(["quizzes", "animals"])] == ["animals", "quizzes"]
    with pytest.raises(ValueError, match="birds"):
        select_sources(["birds"])


def test_missing_file_is_skipped_and_next_source_runs(store, settings, write_seed) -> None:
    write_seed("users", export_records(2))

    report = run_bootstrap(store, settings, select_sources(["animals", "users"]))

    animals, users = report.outcomes
    assert animals.status is SeedStatus.SKIPPED
    assert animals.reason == "file not found"
    assert users.status is SeedStatus.SUCCESS
    assert users.inserted == 2
    assert store.count(Animal) == 0
    assert ("insert", "507f1f77bcf86cd799439001") in store.writes
    assert all(kind != "delete_all" for kind, _ in store.writes)


def test_empty_file_is_skipped_even_with_force_reset(store, settings, write_seed) -> None:
    write_seed("animals", [])
    forced = replace(settings, force_reseed=True)

    outcome = seed_source(store, SeedSource("animals", Animal), forced)

    assert outcome.status is SeedStatus.SKIPPED
    assert outcome.reason == "no data"
    assert store.writes == []


def test_parse_error_is_reported_and_run_continues(store, settings, write_seed) -> None:
    write_seed("experts", "{not json")
    write_seed("sponsors", export_records(1))

    report = run_bootstrap(store, settings, select_sources(["experts", "sponsors"]))

    assert report.get("experts").status is SeedStatus.ERROR
    assert "animalec.experts.json" in report.get("experts").error
    assert report.get("sponsors").status is SeedStatus.SUCCESS
    assert store.count(Sponsor) == 1
    assert store.count(Expert) == 0


def test_store_failure_becomes_source_error(store, settings, write_seed) -> None:
    write_seed("animals", export_records(1))
    write_seed("users", export_records(1))
    original = store.count

    def count(model):
        if model is Animal:
            raise OperationalError("SELECT count(*)", {}, Exception("connection refused"))
        return original(model)

    store.count = count

    report = run_bootstrap(store, settings, select_sources(["animals", "users"]))

    assert report.get("animals").status is SeedStatus.ERROR
    assert "connection refused" in report.get("animals").error
    assert report.get("users").inserted == 1
    assert store.count(User) == 1


def test_report_tallies_and_summary_log(store, settings, write_seed, caplog) -> None:
    caplog.set_level(logging.INFO)
    write_seed("animals", export_records(2))
    write_seed("users", "[oops")
    records = export_records(2)
    records.append({"no": "id"})
    write_seed("experts", records)

    report = run_bootstrap(store, settings)

    assert len(report.outcomes) == len(SEED_SOURCES)
    assert [o.source for o in report.outcomes] == [s.name for s in SEED_SOURCES]
    assert len(report.successful) == 2
    assert len(report.skipped) == 4
    assert len(report.errors) == 1
    assert report.ok is False
    assert report.get("experts").partial is True

    summary = next(r for r in caplog.records if r.getMessage() == "Bootstrap summary")
    assert (summary.successful, summary.skipped, summary.errors) == (2, 4, 1)
    failed = [r for r in caplog.records if r.getMessage() == "Collection failed"]
    assert [r.collection for r in failed] == ["users"]
    assert any(r.getMessage() == "Database bootstrap completed" for r in caplog.records)


def test_second_run_is_a_noop(store, settings, write_seed) -> None:
    for source in SEED_SOURCES:
        write_seed(source.name, export_records(3))

    first = run_bootstrap(store, settings)
    assert len(first.successful) == len(SEED_SOURCES)

    store.writes.clear()
    second = run_bootstrap(store, settings)
    assert len(second.skipped) == len(SEED_SOURCES)
    assert all(o.existing == 3 for o in second.outcomes)
    assert store.writes == []


def test_bootstrap_never_raises(store, settings, caplog) -> None:
    class Exploding:
        def __iter__(self):
            raise RuntimeError("registry unavailable")

    report = run_bootstrap(store, settings, Exploding())

    assert report.outcomes == []
    assert any(r.getMessage() == "Database bootstrap aborted" for r in caplog.records)


@pytest.mark.parametrize(
    "content",
    ['[{"_id": "a", "n": ' + "9" * 5000 + "}]", "[" * 100000],
    ids=["int-digit-limit", "deep-nesting"],
)
def test_undecodable_snapshot_does_not_stop_later_sources(store, settings, write_seed, content) -> None:
    write_seed("animals", content)
    write_seed("users", export_records(2))

    report = run_bootstrap(store, settings, select_sources(["animals", "users"]))

    assert [o.status for o in report.outcomes] == [SeedStatus.ERROR, SeedStatus.SUCCESS]
    assert report.get("users").inserted == 2
    assert store.count(User) == 2


def test_unexpected_loader_error_becomes_source_error(store, settings, write_seed, monkeypatch) -> None:
    from animalec_api.seeding import bootstrap

    write_seed("users", export_records(1))
    real_loader = bootstrap.load_seed_file

    def load(path):
        if path.name == "animalec.animals.json":
            raise RuntimeError("storage offline")
        return real_loader(path)

    monkeypatch.setattr(bootstrap, "load_seed_file", load)

    report = run_bootstrap(store, settings, select_sources(["animals", "users"]))

    assert report.get("animals").status is SeedStatus.ERROR
    assert report.get("animals").error == "storage offline"
    assert report.get("users").inserted == 1
