"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for running the interaction layer against a real browser.

Key Features:
- Browser lifecycle through BrowserManager (skips when no browser can launch)
- Interaction driver with short timings for inline-HTML scenarios
- Page Object fixtures
- Screenshot capture on failure, attached to the Allure report

================================================================================
"""

import os
from typing import AsyncGenerator

import allure
import pytest
from loguru import logger
from playwright.async_api import Page

from webui_suites.ui_testing.framework.browser_manager import BrowserManager
from webui_suites.ui_testing.framework.interaction_driver import (
    InteractionDriver,
    InteractionSettings,
)
from webui_suites.ui_testing.pages import AllPages


# Short timings so inline-HTML scenarios finish quickly
FAST_SETTINGS = dict(
    selector_timeout_ms=3000,
    readiness_timeout_ms=3000,
    polling_interval_ms=100,
    navigation_timeout_ms=30000,
    page_load_timeout_ms=10000,
    script_settle_ms=50,
    slow_type_lead_in_ms=100,
    click_settle_ms=100,
)

# Playwright's own actionability waits (click, fill) give up after this long
ACTION_TIMEOUT_MS = 2000


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Started browser manager, or a skip when the configured browser cannot launch.

    Browser binaries are installed separately (``playwright install``), so a
    missing binary is an environment issue rather than a test failure.
    """
    manager = BrowserManager()
    try:
        await manager.start()
    except Exception as e:
        pytest.skip(f"Browser unavailable: {e}")
    yield manager
    await manager.close()


@pytest.fixture
async def page(browser_manager: BrowserManager, request) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page on a fresh context.

    Takes a full-page screenshot when the test body failed.
    """
    page = await browser_manager.new_page()
    page.set_default_timeout(ACTION_TIMEOUT_MS)
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            allure.attach(
                await page.screenshot(full_page=True),
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
        except Exception as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")


@pytest.fixture
def driver(page: Page) -> InteractionDriver:
    return InteractionDriver(page, settings=InteractionSettings(**FAST_SETTINGS))


@pytest.fixture
def live_driver(page: Page) -> InteractionDriver:
    """Driver with the configured (production) timings."""
    page.set_default_timeout(InteractionSettings.from_config().selector_timeout_ms)
    return InteractionDriver(page)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def all_pages(live_driver: InteractionDriver) -> AllPages:
    return AllPages(live_driver)


@pytest.fixture
def e2e_enabled() -> None:
    """Skip unless live-site tests were requested with RUN_E2E=1."""
    if os.getenv("RUN_E2E") != "1":
        pytest.skip("Live-site tests run only with RUN_E2E=1")


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase's report on the item so fixtures can see failures."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
