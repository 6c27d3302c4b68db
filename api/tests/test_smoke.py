"""Minimal smoke tests for API service."""

import json

from sqlmodel import Session


def test_health_endpoint_returns_ok_and_startup_seeds(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'api.db'}")
    monkeypatch.delenv("SEED_DATA_DIR", raising=False)
    monkeypatch.delenv("FORCE_RESEED", raising=False)
    monkeypatch.delenv("SEED_ON_STARTUP", raising=False)
    # Import inside the test to ensure environment variables are already set
    from fastapi.testclient import TestClient
    from animalec_api.main import app
    from animalec_api.config import DEFAULT_SEED_DIR
    from shared_models import Animal, Quiz

    expected_animals = len(json.loads((DEFAULT_SEED_DIR / "animalec.animals.json").read_text(encoding="utf-8")))

    with TestClient(app) as client:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

        report = app.state.seed_report
        assert report.ok
        assert len(report.successful) == 7
        store = app.state.store
        assert store.count(Animal) == expected_animals
        with Session(store.engine) as session:
            quiz = session.get(Quiz, "64a1f0c2e4b0a1b2c3d4e901")
            assert len(quiz.document["questions"]) == 3

    assert app.state.store is None


def test_startup_survives_broken_seed_data(monkeypatch, tmp_path) -> None:
    seed_dir = tmp_path / "seed"
    seed_dir.mkdir()
    (seed_dir / "animalec.animals.json").write_text("{{{", encoding="utf-8")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'api.db'}")
    monkeypatch.setenv("SEED_DATA_DIR", str(seed_dir))
    from fastapi.testclient import TestClient
    from animalec_api.main import app

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        report = app.state.seed_report
        assert len(report.errors) == 1
        assert len(report.skipped) == 6


def test_startup_seeding_can_be_disabled(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'api.db'}")
    monkeypatch.setenv("SEED_ON_STARTUP", "false")
    from fastapi.testclient import TestClient
    from animalec_api.main import app
    from shared_models import Animal

    app.state.seed_report = None
    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        assert app.state.seed_report is None
        assert app.state.store.count(Animal) == 0
