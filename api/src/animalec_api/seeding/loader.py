from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from .errors import SeedParseError, SeedSourceEmpty, SeedSourceMissing

logger = logging.getLogger(__name__)


def load_seed_file(path: Path) -> List[Any]:
    """Read the records of one snapshot file, in file order.

    Raises:
        SeedSourceMissing: The file does not exist.
        SeedSourceEmpty: The file holds no array, or an empty one.
        SeedParseError: The file cannot be read or is not valid JSON.
    """
    if not path.is_file():
        raise SeedSourceMissing(f"Seed file not found: {path.name}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    # JSONDecodeError, UnicodeDecodeError and the int digit limit are all ValueErrors.
    except (OSError, ValueError, RecursionError) as exc:
        raise SeedParseError(f"Failed to parse {path.name}: {exc}") from exc

    if not isinstance(payload, list) or not payload:
        raise SeedSourceEmpty(f"No data in {path.name}")

    logger.debug("Seed file loaded", extra={"file": path.name, "records": len(payload)})
    return payload
