from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple, Type

from shared_models import Animal, DocumentBase, Expert, Question, Quiz, Sponsor, User, UserLevel

SEED_FILE_PREFIX = "animalec"


@dataclass(frozen=True)
class SeedSource:
    """One collection snapshot bound to its target table.

    Attributes:
        name: Collection name, also the table name.
        model: Table the records are reconciled into.
        key_field: Record field used as the sole reconciliation key.
    """

    name: str
    model: Type[DocumentBase]
    key_field: str = "_id"

    @property
    def filename(self) -> str:
        return f"{SEED_FILE_PREFIX}.{self.name}.json"

    def path_in(self, seed_dir: Path) -> Path:
        return seed_dir / self.filename


# Declared order is the seeding order.
SEED_SOURCES: Tuple[SeedSource, ...] = (
    SeedSource("animals", Animal),
    SeedSource("users", User),
    SeedSource("user_levels", UserLevel),
    SeedSource("experts", Expert),
    SeedSource("sponsors", Sponsor),
    SeedSource("questions", Question),
    SeedSource("quizzes", Quiz),
)


def select_sources(names: Iterable[str], sources: Tuple[SeedSource, ...] = SEED_SOURCES) -> Tuple[SeedSource, ...]:
    """Restrict ``sources`` to ``names`` while keeping the declared order."""
    wanted = set(names)
    known = {source.name for source in sources}
    unknown = sorted(wanted - known)
    if unknown:
        raise ValueError(f"Unknown collections: {', '.join(unknown)}")
    return tuple(source for source in sources if source.name in wanted)
