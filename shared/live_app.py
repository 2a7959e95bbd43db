"""Reachability helpers for the externally launched card delivery app."""

from __future__ import annotations

import logging
import time

import requests

logger = logging.getLogger(__name__)


class AppUnavailableError(RuntimeError):
    """Raised when the delivery app does not answer within the readiness window."""


def is_app_ready(url: str, timeout: int = 2) -> bool:
    """Return True when the form page responds with 200."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_app_ready(url: str, timeout: int = 10, interval: int = 1) -> None:
    """Poll the form page until it answers or the timeout expires."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_app_ready(url):
            logger.info("Card delivery app is up at %s", url)
            return
        time.sleep(interval)
    raise AppUnavailableError(
        f"Card delivery app at {url} not reachable after {timeout}s; "
        "start it with `java -jar ./artifacts/app-card-delivery.jar`"
    )
