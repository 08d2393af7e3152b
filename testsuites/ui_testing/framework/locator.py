"""
================================================================================
Element Locators
================================================================================

Immutable selector definitions used as class constants on page objects.

A selector starting with ``//`` or ``(`` is an XPath expression, anything
else is CSS. The engine is always spelled out (``xpath=...``, ``css=...``)
when handing the selector to Playwright, which would otherwise read a
parenthesised XPath such as ``(//a)[1]`` as CSS.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from playwright.async_api import Locator as PlaywrightLocator
from playwright.async_api import Page


@dataclass(frozen=True)
class Locator:
    """
    A named selector, optionally scoped inside an iframe.

    Attributes:
        selector: XPath or CSS expression
        name: Human-readable element name for logs and reports
        frame: Selector of the iframe the element lives in (if any)
    """
    selector: str
    name: str = ""
    frame: Optional[str] = None

    @property
    def query(self) -> str:
        """Selector with an explicit engine prefix, as passed to Playwright."""
        return f"{self.strategy}={self.selector}"

    @property
    def strategy(self) -> str:
        """Selector engine implied by the expression."""
        return "xpath" if self.selector.startswith(("//", "(")) else "css"

    def resolve(self, page: Page) -> PlaywrightLocator:
        """
        Bind the selector to a live page.

        Resolution is lazy: nothing is queried until the returned locator is
        asked about count, visibility or state.
        """
        root = page.frame_locator(self.frame) if self.frame else page
        return root.locator(self.query)

    def __str__(self) -> str:
        label = self.name or "element"
        scope = f" in frame {self.frame}" if self.frame else ""
        return f"'{label}' ({self.strategy}: {self.selector}){scope}"


__all__ = [
    "Locator",
]
