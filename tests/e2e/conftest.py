"""Playwright fixtures for card delivery E2E tests."""

from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from shared.context import HarnessContext
from shared.live_app import AppUnavailableError, wait_for_app_ready
from tests.e2e.pages.card_delivery_page import CardDeliveryPage


@pytest.fixture(scope="session")
def live_app(harness_context: HarnessContext, harness_config) -> str:
    """
    Return the URL of the running delivery app.

    The app is never started here; if it does not answer within the
    readiness window every test that needs it errors out.
    """
    try:
        wait_for_app_ready(harness_context.base_url, timeout=harness_config.READY_TIMEOUT_S)
    except AppUnavailableError as exc:
        pytest.fail(str(exc), pytrace=False)
    return harness_context.base_url


@pytest.fixture(scope="session")
def browser_context_args(harness_config):
    return {
        "viewport": dict(harness_config.VIEWPORT),
        "ignore_https_errors": True,
        "locale": "ru-RU",
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict
) -> Generator[BrowserContext, None, None]:
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def delivery_form(
    live_app: str, page: Page, harness_context: HarnessContext
) -> CardDeliveryPage:
    """Open a fresh card delivery form for the current test."""
    form = CardDeliveryPage(
        page,
        live_app,
        timeout_ms=harness_context.default_timeout_ms,
        notification_timeout_ms=harness_context.notification_timeout_ms,
    )
    return form.open()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on UI test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            screenshot_dir = "test-results/screenshots"
            os.makedirs(screenshot_dir, exist_ok=True)
            test_name = item.name.replace("/", "_").replace("::", "_")
            screenshot_path = f"{screenshot_dir}/{test_name}.png"
            try:
                page.screenshot(path=screenshot_path)
                print(f"\nScreenshot saved: {screenshot_path}")
            except Exception as exc:  # pragma: no cover - best effort logging
                print(f"\nFailed to capture screenshot: {exc}")
