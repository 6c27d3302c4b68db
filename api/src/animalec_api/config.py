"""Runtime configuration for the seeder.

All environment parsing for seeding lives here; other modules receive a
``SeedSettings`` value instead of reading the environment themselves.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SEED_DIR = Path(__file__).resolve().parent / "seed_data"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigError(Exception):
    """Raised for missing or invalid runtime configuration."""


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class SeedSettings:
    """Validated seeding configuration.

    Attributes:
        seed_dir: Directory holding the ``animalec.<collection>.json`` snapshots.
        force_reseed: Clear populated collections and reseed them from scratch.
        on_startup: Run the bootstrap when the API process starts.
    """

    seed_dir: Path = DEFAULT_SEED_DIR
    force_reseed: bool = False
    on_startup: bool = True

    @classmethod
    def from_env(cls) -> "SeedSettings":
        seed_dir_value = os.getenv("SEED_DATA_DIR")
        seed_dir = Path(seed_dir_value).expanduser() if seed_dir_value else DEFAULT_SEED_DIR
        if seed_dir.exists() and not seed_dir.is_dir():
            raise ConfigError(f"SEED_DATA_DIR must point to a directory, got file: {seed_dir}")
        return cls(
            seed_dir=seed_dir,
            force_reseed=env_flag("FORCE_RESEED"),
            on_startup=env_flag("SEED_ON_STARTUP", default=True),
        )
