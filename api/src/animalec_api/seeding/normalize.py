"""Normalization of MongoDB export notation.

Snapshots exported with ``mongoexport`` wrap identifiers as ``{"$oid": ...}``
and timestamps as ``{"$date": ...}``. Only mappings whose single key is one
of those wrappers are unwrapped; a wrapper key with sibling keys is an
ordinary mapping and is recursed like any other. Wrapper payloads must be
scalars (or a ``$numberLong`` for dates); anything else fails the record.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from .errors import SeedRecordError

OID_KEY = "$oid"
DATE_KEY = "$date"
NUMBER_LONG_KEY = "$numberLong"

RawRecord = Dict[str, Any]


def _single_key(value: Dict[str, Any]) -> str | None:
    if len(value) != 1:
        return None
    return next(iter(value))


def parse_export_date(raw: Any) -> datetime:
    """Build a timezone-aware UTC datetime from a ``$date`` payload.

    Accepts ISO-8601 strings (``Z`` suffix allowed, naive values are read as
    UTC), milliseconds since the epoch, and the canonical
    ``{"$numberLong": "<ms>"}`` form.
    """
    if isinstance(raw, dict) and _single_key(raw) == NUMBER_LONG_KEY:
        raw = raw[NUMBER_LONG_KEY]
        try:
            raw = int(raw)
        except (TypeError, ValueError) as exc:
            raise SeedRecordError(f"Invalid $numberLong date value: {raw!r}") from exc

    if isinstance(raw, bool):
        raise SeedRecordError(f"Invalid $date value: {raw!r}")
    if isinstance(raw, (int, float)):
        try:
            return datetime.fromtimestamp(raw / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise SeedRecordError(f"Out of range $date value: {raw!r}") from exc
    if isinstance(raw, str):
        text = raw.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise SeedRecordError(f"Invalid $date value: {raw!r}") from exc
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    raise SeedRecordError(f"Unsupported $date payload: {raw!r}")


def normalize_value(value: Any) -> Any:
    if isinstance(value, dict):
        key = _single_key(value)
        if key == OID_KEY:
            if isinstance(value[OID_KEY], (dict, list)):
                raise SeedRecordError(f"$oid payload must be a scalar, got {value[OID_KEY]!r}")
            return value[OID_KEY]
        if key == DATE_KEY:
            return parse_export_date(value[DATE_KEY])
        return {k: normalize_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [normalize_value(item) for item in value]
    return value


def normalize_record(record: Any) -> RawRecord:
    if not isinstance(record, dict):
        raise SeedRecordError(f"Expected a JSON object, got {type(record).__name__}")
    return normalize_value(record)
