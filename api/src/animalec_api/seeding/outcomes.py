from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class SeedStatus(str, Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass(frozen=True)
class SeedOutcome:
    """Terminal result of seeding one source."""

    source: str
    status: SeedStatus
    inserted: int = 0
    unmodified: int = 0
    failed: int = 0
    existing: Optional[int] = None
    reason: Optional[str] = None
    error: Optional[str] = None

    @property
    def partial(self) -> bool:
        return self.status is SeedStatus.SUCCESS and self.failed > 0

    @classmethod
    def success(cls, source: str, inserted: int, unmodified: int, failed: int = 0) -> "SeedOutcome":
        return cls(source, SeedStatus.SUCCESS, inserted=inserted, unmodified=unmodified, failed=failed)

    @classmethod
    def skipped(cls, source: str, reason: str, existing: Optional[int] = None) -> "SeedOutcome":
        return cls(source, SeedStatus.SKIPPED, reason=reason, existing=existing)

    @classmethod
    def failure(cls, source: str, error: str) -> "SeedOutcome":
        return cls(source, SeedStatus.ERROR, error=error)


@dataclass
class BootstrapReport:
    outcomes: List[SeedOutcome] = field(default_factory=list)

    def add(self, outcome: SeedOutcome) -> None:
        self.outcomes.append(outcome)

    def _with_status(self, status: SeedStatus) -> List[SeedOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def successful(self) -> List[SeedOutcome]:
        return self._with_status(SeedStatus.SUCCESS)

    @property
    def skipped(self) -> List[SeedOutcome]:
        return self._with_status(SeedStatus.SKIPPED)

    @property
    def errors(self) -> List[SeedOutcome]:
        return self._with_status(SeedStatus.ERROR)

    @property
    def ok(self) -> bool:
        return not self.errors

    def get(self, source: str) -> Optional[SeedOutcome]:
        return next((o for o in self.outcomes if o.source == source), None)
