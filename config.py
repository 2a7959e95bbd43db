"""
Test harness configuration module.

This module defines configuration classes for the environments the
card delivery suite runs in (local workstation, CI). Configuration
values are loaded from environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


def _optional_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return None
    return int(raw)


class Config:
    """Base configuration with default settings."""

    # The delivery app is started separately:
    #   java -jar ./artifacts/app-card-delivery.jar &
    BASE_URL: str = os.environ.get("CARD_DELIVERY_BASE_URL", "http://localhost:9999")

    CITIES_FILE: Path = Path(
        os.environ.get(
            "CARD_DELIVERY_CITIES_FILE",
            str(BASE_DIR / "shared" / "data" / "cities.json"),
        )
    )

    # Bounded-wait windows for UI assertions, in milliseconds
    DEFAULT_TIMEOUT_MS: int = 10_000
    NOTIFICATION_TIMEOUT_MS: int = 15_000

    # Meeting date is always today + DAYS_AHEAD
    DAYS_AHEAD: int = 3

    VIEWPORT: dict = {"width": 1920, "height": 1080}

    # How long to wait for the delivery app to answer before giving up
    READY_TIMEOUT_S: int = 10

    RANDOM_SEED: int | None = _optional_int("CARD_DELIVERY_SEED")


class LocalConfig(Config):
    """Local workstation configuration."""

    READY_TIMEOUT_S: int = 10


class CIConfig(Config):
    """CI pipeline configuration."""

    # The jar is launched in the background right before pytest in CI
    READY_TIMEOUT_S: int = 60


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses CARD_DELIVERY_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("CARD_DELIVERY_ENV", "local")
    return config.get(env, config["default"])
