"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser per test or scenario, no state shared between runs
    - Guaranteed release on every exit path (async context manager)
    - Browser configuration presets from ``ui.*`` config

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from autotest_tools.common import get_bool, get_config


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Owns one Playwright browser for the duration of a test or scenario.

    ``close()`` quits the browser at most once, however many times it is
    called, so harness teardown and explicit cleanup can both call it.

    Usage:
        async with BrowserManager() as manager:
            page = await manager.new_page()
            await page.goto("https://the-internet.herokuapp.com/")
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
    }

    # Extra launch flags per engine
    BROWSER_ARGS: Dict[str, list] = {
        "chromium": ["--start-maximized", "--ignore-certificate-errors"],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: bool = True,
        browser_type: str = "chromium",
        viewport: Optional[Dict[str, int]] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
            viewport: Page viewport size ({"width": ..., "height": ...})
        """
        if browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser {browser_type!r}; expected one of {SUPPORTED_BROWSERS}"
            )
        self.headless = headless
        self.browser_type = browser_type
        self.viewport = viewport or dict(self.DEFAULT_CONTEXT_OPTIONS["viewport"])

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: list[BrowserContext] = []
        self._closed = False

    @classmethod
    def from_config(cls) -> "BrowserManager":
        """Build a manager from ``ui.browser``, ``ui.headless`` and ``ui.viewport``."""
        viewport = get_config("ui.viewport", {}) or {}
        return cls(
            headless=get_bool("ui.headless", True),
            browser_type=str(get_config("ui.browser", "chromium")).lower(),
            viewport={
                "width": int(viewport.get("width", 1920)),
                "height": int(viewport.get("height", 1080)),
            },
        )

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    @property
    def is_running(self) -> bool:
        return self._browser is not None

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        if self._closed:
            raise RuntimeError("BrowserManager already closed; create a new one.")

        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }
        if self.browser_type in self.BROWSER_ARGS:
            launch_options["args"] = list(self.BROWSER_ARGS[self.browser_type])

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    async def close(self) -> None:
        """Close all contexts, the browser and Playwright. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True

        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.warning(f"Failed to close browser context: {e}")
        self._contexts.clear()

        try:
            if self._browser:
                await self._browser.close()
        finally:
            self._browser = None
            if self._playwright:
                await self._playwright.stop()
                self._playwright = None

        logger.debug("Browser closed")

    async def new_context(
        self,
        **options: Any,
    ) -> BrowserContext:
        """
        Create new browser context.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {
            **self.DEFAULT_CONTEXT_OPTIONS,
            "viewport": self.viewport,
            **options,
        }
        context = await self._browser.new_context(**context_options)
        self._contexts.append(context)

        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context

        Returns:
            New Page
        """
        if context is None:
            context = await self.new_context(**context_options)

        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


# =============================================================================
# Convenience Functions
# =============================================================================

@asynccontextmanager
async def browser_session(
    start_url: Optional[str] = None,
    manager: Optional[BrowserManager] = None,
) -> AsyncIterator[Page]:
    """
    Open a browser, navigate to the start URL and yield the page.

    The browser is closed on every exit path, including assertion failures
    raised inside the ``async with`` block.

    Args:
        start_url: URL to open first (defaults to ``ui.base_url``)
        manager: Manager to use (defaults to ``BrowserManager.from_config()``)

    Usage:
        async with browser_session() as page:
            home = HomePage(page)
            await home.loading_banner_check()
    """
    manager = manager or BrowserManager.from_config()
    start_url = start_url or get_config("ui.base_url")

    try:
        await manager.start()
        page = await manager.new_page()
        await page.goto(start_url)
        logger.info(f"Browser session opened at {start_url}")
        yield page
    finally:
        await manager.close()


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
    "browser_session",
]
