"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for live UI tests, providing fixtures for
browser management, page objects, and test setup/teardown.

Key Features:
- One browser per test, always closed (even when the test fails)
- Page Object fixtures
- Screenshot capture on failure

================================================================================
"""

from typing import AsyncGenerator

import pytest
from loguru import logger
from playwright.async_api import Page

from autotest_tools.common import get_config
from autotest_tools.report_tools.allure_utils import attach_png, attach_text
from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.pages.home_page import HomePage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="function")
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Function-scoped browser manager fixture.

    Each test gets its own browser; teardown runs whatever the test outcome.
    """
    manager = BrowserManager.from_config()
    await manager.start()
    yield manager
    await manager.close()


@pytest.fixture(scope="function")
async def page(request, browser_manager: BrowserManager) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture, opened at the configured start URL.

    Attaches a screenshot and the current URL to Allure when the test body
    failed.
    """
    page = await browser_manager.new_page()
    await page.goto(get_config("ui.base_url"))
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            attach_png(await page.screenshot(full_page=True), name="failure_screenshot")
            attach_text(page.url, name="Current URL")
        except Exception as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def home_page(page: Page) -> HomePage:
    """
    Provides HomePage bound to the test's page (already at the start URL).
    """
    return HomePage(page)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item so fixtures can see the outcome."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
