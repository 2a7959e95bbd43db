"""Session-wide, read-only context handed to every card delivery scenario."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import date

from config import Config
from shared.fixtures import load_cities
from shared.form_data import ValidFormValues, meeting_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HarnessContext:
    """
    Immutable settings and fixture data for one test run.

    Attributes:
        cities: Valid delivery cities loaded from the fixture file.
        base_url: URL of the running delivery app.
        days_ahead: Offset applied to today's date for the meeting date.
        default_timeout_ms: Bounded-wait window for UI assertions.
        notification_timeout_ms: Longer window for the success notification.
        seed: Base seed for city selection; None draws unseeded.
    """

    cities: tuple[str, ...]
    base_url: str
    days_ahead: int = 3
    default_timeout_ms: int = 10_000
    notification_timeout_ms: int = 15_000
    seed: int | None = None

    @classmethod
    def load(cls, cfg: type[Config]) -> HarnessContext:
        """
        Build the context from a configuration class.

        Raises:
            FixtureError: If the city fixture cannot be loaded.
        """
        cities = load_cities(cfg.CITIES_FILE)
        if cfg.RANDOM_SEED is not None:
            logger.info("Seeding city selection with %d", cfg.RANDOM_SEED)
        return cls(
            cities=cities,
            base_url=cfg.BASE_URL,
            days_ahead=cfg.DAYS_AHEAD,
            default_timeout_ms=cfg.DEFAULT_TIMEOUT_MS,
            notification_timeout_ms=cfg.NOTIFICATION_TIMEOUT_MS,
            seed=cfg.RANDOM_SEED,
        )

    def rng_for(self, key: str) -> random.Random:
        """
        Return a fresh random source for one test.

        With a seed set, the same ``key`` (a test node id) always yields
        the same sequence, whatever order the tests run in.
        """
        if self.seed is None:
            return random.Random()
        return random.Random(f"{self.seed}:{key}")

    def valid_values(self, key: str = "", today: date | None = None) -> ValidFormValues:
        """Draw a set of valid form values for the test identified by ``key``."""
        return ValidFormValues.build(self.cities, self.rng_for(key), self.days_ahead, today)

    def meeting_date(self, today: date | None = None) -> str:
        return meeting_date(self.days_ahead, today)
