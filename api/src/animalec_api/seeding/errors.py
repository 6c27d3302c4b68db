"""Seeding exception hierarchy.

Skips, source errors and per-record failures are separate types so the
orchestrator can contain each one at its own scope.
"""

from __future__ import annotations


class SeedError(Exception):
    """Base exception for all seeding failures."""


class SeedSourceSkipped(SeedError):
    """A snapshot has nothing to seed; the source is skipped, not failed."""

    reason = "skipped"


class SeedSourceMissing(SeedSourceSkipped):
    reason = "file not found"


class SeedSourceEmpty(SeedSourceSkipped):
    reason = "no data"


class SeedParseError(SeedError):
    """Raised when a snapshot file cannot be read or decoded."""


class SeedRecordError(SeedError, ValueError):
    """Raised when a single record cannot be normalized or converted."""
