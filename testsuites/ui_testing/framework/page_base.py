"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the configured base URL
    - Fluent wait primitives (visible / clickable)
    - Screenshot and failure capture for Allure

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Locator as PlaywrightLocator
from playwright.async_api import Page

from autotest_tools.common import get_config
from autotest_tools.report_tools.allure_utils import attach_png, attach_text

from .locator import Locator
from .wait_policy import WaitCondition, WaitPolicy, wait_until


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class BasePage:
    """
    Base class for all page objects.

    A page object holds the shared Playwright page (owned by the test
    harness, never closed here), the base URL and one wait policy. Locators
    are class constants and are only resolved when a wait runs, so a page
    object returned by a navigation never reuses elements of the previous
    page.

    Usage:
        class DropDownPage(BasePage):
            URL_PATH = "/dropdown"
            DROPDOWN = Locator("#dropdown", name="dropdown")

            async def select(self, text: str):
                select = await self.wait_for_clickable(self.DROPDOWN)
                await select.select_option(label=text)
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""
    PAGE_KEY: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        wait_policy: Optional[WaitPolicy] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (defaults to ``ui.base_url``)
            wait_policy: Wait policy (defaults to ``ui.wait.*`` config)
        """
        self.page = page
        if not base_url:
            base_url = get_config("ui.base_url", "https://the-internet.herokuapp.com/")
        self.base_url = base_url.rstrip("/")
        self.wait_policy = wait_policy or WaitPolicy.from_config()

    def next_page(self, page_class: type) -> "BasePage":
        """Construct the page object reached by a navigation, bound to the same page."""
        return page_class(self.page, base_url=self.base_url, wait_policy=self.wait_policy)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.URL_PATH}"):
            await self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")

    # =========================================================================
    # Wait Utilities
    # =========================================================================

    async def wait_for_visible(self, locator: Locator) -> PlaywrightLocator:
        """
        Wait until the element is visible.

        Raises:
            SynchronizationTimeoutError: Element never became visible
        """
        return await wait_until(self.page, locator, WaitCondition.VISIBLE, self.wait_policy)

    async def wait_for_clickable(self, locator: Locator) -> PlaywrightLocator:
        """
        Wait until the element is visible and enabled, and return it.

        Raises:
            SynchronizationTimeoutError: Element never became clickable
        """
        return await wait_until(self.page, locator, WaitCondition.CLICKABLE, self.wait_policy)

    # =========================================================================
    # Element Interactions
    # =========================================================================

    async def click(self, locator: Locator) -> None:
        """Wait for the element to become clickable, then click it."""
        with allure.step(f"Click: {locator.name or locator.selector}"):
            element = await self.wait_for_clickable(locator)
            await element.click()

    async def get_text(self, locator: Locator) -> str:
        """Wait for the element to become visible and return its text."""
        element = await self.wait_for_visible(locator)
        return (await element.inner_text()).strip()

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        png = await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            attach_png(png, name=name)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves:
            - Screenshot
            - Current URL
        """
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            attach_text(self.page.url, name="Current URL")


__all__ = [
    "BasePage",
    "PageBase",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
