import logging
import os

from fastapi import FastAPI

from animalec_api.config import SeedSettings
from animalec_api.db import build_database_url, create_db_engine
from animalec_api.logging_config import configure_logging
from animalec_api.seeding import DocumentStore, run_bootstrap

configure_logging(
    service_name=os.getenv("LOG_SERVICE_NAME", "api"),
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Animalec API")
app.state.store = None
app.state.seed_report = None


@app.get("/health")
def healthcheck() -> dict:
    return {"status": "ok"}


@app.on_event("startup")
def _open_store_and_seed() -> None:
    settings = SeedSettings.from_env()
    store = DocumentStore(create_db_engine(build_database_url()))
    store.create_schema()
    app.state.store = store
    logger.info("Connected to DB", extra={"dialect": store.engine.dialect.name})

    if not settings.on_startup:
        logger.info("Startup seeding disabled (SEED_ON_STARTUP=false)")
        return
    # run_bootstrap never raises: the API starts with or without seed data
    app.state.seed_report = run_bootstrap(store, settings)


@app.on_event("shutdown")
def _close_store() -> None:
    store = app.state.store
    if store is not None:
        store.close()
        app.state.store = None


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
