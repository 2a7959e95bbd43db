"""Static test-input data shared by the card delivery suites."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FixtureError(RuntimeError):
    """Raised when a bundled fixture file is missing or malformed."""


def load_cities(path: Path | str) -> tuple[str, ...]:
    """
    Load the list of valid delivery cities from a JSON fixture.

    The file must look like ``{"cities": ["Москва", ...]}``. The list is
    returned as a tuple so it cannot be mutated by the tests sharing it.

    Args:
        path: Location of the JSON fixture.

    Returns:
        Tuple of city names in file order.

    Raises:
        FixtureError: If the file is missing, unparseable, or does not
            contain a non-empty list of strings under ``cities``.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FixtureError(f"Cannot read city fixture {path}: {exc}") from exc

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise FixtureError(f"City fixture {path} is not valid JSON: {exc}") from exc

    if not isinstance(document, dict) or "cities" not in document:
        raise FixtureError(f"City fixture {path} has no 'cities' key")

    cities = document["cities"]
    if not isinstance(cities, list) or not cities:
        raise FixtureError(f"City fixture {path}: 'cities' must be a non-empty list")

    bad = [item for item in cities if not isinstance(item, str) or not item.strip()]
    if bad:
        raise FixtureError(f"City fixture {path} contains invalid entries: {bad!r}")

    logger.info("Loaded %d cities from %s", len(cities), path)
    return tuple(cities)
