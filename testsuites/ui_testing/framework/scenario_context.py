"""
================================================================================
Scenario Context
================================================================================

Per-scenario state carried between BDD steps.

Behave's ``context`` object is shared by the whole run and only layers
attributes per scenario, so steps keep their mutable state on an explicit
ScenarioContext instead. ``environment.before_scenario`` creates a fresh one
for every scenario and ``after_scenario`` disposes of it.

================================================================================
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Dict, Optional, TypeVar

from loguru import logger
from playwright.async_api import Page

from .browser_manager import BrowserManager
from .page_base import BasePage

T = TypeVar("T")


@dataclass
class ScenarioContext:
    """
    Mutable state of a single scenario.

    Attributes:
        name: Scenario name (for logs)
        loop: Event loop every async page call of this scenario runs on
        manager: Browser owned by this scenario
        page: Playwright page shared by all page objects of the scenario
        current_page: Page object the scenario is currently on
        pages: Page objects reached so far, keyed by attribute name
    """
    name: str = ""
    loop: asyncio.AbstractEventLoop = field(default_factory=asyncio.new_event_loop)
    manager: Optional[BrowserManager] = None
    page: Optional[Page] = None
    current_page: Optional[BasePage] = None
    pages: Dict[str, BasePage] = field(default_factory=dict)

    def run(self, awaitable: Awaitable[T]) -> T:
        """Drive a coroutine to completion on the scenario's loop."""
        return self.loop.run_until_complete(awaitable)

    def visit(self, page_object: BasePage, key: Optional[str] = None) -> BasePage:
        """Record the page object the scenario moved to and make it current."""
        key = key or page_object.PAGE_KEY or type(page_object).__name__
        self.pages[key] = page_object
        self.current_page = page_object
        logger.debug(f"[{self.name}] now on {type(page_object).__name__}")
        return page_object

    def get_page(self, key: str) -> Any:
        """
        Return a page object visited earlier in this scenario.

        Raises:
            LookupError: The scenario never reached that page
        """
        try:
            return self.pages[key]
        except KeyError:
            raise LookupError(
                f"Scenario {self.name!r} has not visited {key!r}; visited: {sorted(self.pages)}"
            ) from None

    async def open(self) -> Page:
        """Start the scenario's browser and open its page."""
        if self.manager is None:
            self.manager = BrowserManager.from_config()
        await self.manager.start()
        self.page = await self.manager.new_page()
        return self.page

    def close(self) -> None:
        """Release the browser and the loop. Runs whatever state the scenario ended in."""
        if self.loop.is_closed():
            return
        try:
            if self.manager is not None:
                self.run(self.manager.close())
        finally:
            self.page = None
            self.current_page = None
            self.pages.clear()
            self.loop.close()


__all__ = [
    "ScenarioContext",
]
