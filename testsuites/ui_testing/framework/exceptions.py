"""
================================================================================
UI Automation Errors
================================================================================

Failure taxonomy shared by the wait loop, page objects and step dispatch.
Every error bubbles up to the step/test and is reported as a failure; only
ElementNotFoundError is ever absorbed, and only inside the wait loop.

================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from .locator import Locator


class UiAutomationError(Exception):
    """Base class for all suite-level UI failures."""
    pass


class ElementNotFoundError(UiAutomationError):
    """Raised when a locator matches nothing during a single poll attempt."""

    def __init__(self, locator: "Locator"):
        self.locator = locator
        super().__init__(f"No element matches {locator}")


class SynchronizationTimeoutError(UiAutomationError):
    """Raised when a wait condition never held within the allotted window."""

    def __init__(self, locator: "Locator", condition: str, timeout: float, attempts: int = 0):
        self.locator = locator
        self.condition = condition
        self.timeout = timeout
        self.attempts = attempts
        super().__init__(
            f"Timed out after {timeout:g}s ({attempts} attempts) "
            f"waiting for {locator} to be {condition}"
        )


class UnknownPageNameError(UiAutomationError):
    """Raised when navigation dispatch receives a page name it cannot route."""

    def __init__(self, page_name: str, known: Iterable[str]):
        self.page_name = page_name
        self.known = tuple(known)
        super().__init__(
            f"Unknown page name {page_name!r}; expected one of: {', '.join(self.known)}"
        )


class OptionNotFoundError(UiAutomationError):
    """Raised when a select element has no option with the requested label."""

    def __init__(self, option: str, available: Iterable[str]):
        self.option = option
        self.available = tuple(available)
        super().__init__(
            f"Option {option!r} not found; available: {list(self.available)}"
        )


class DialogNotHandledError(UiAutomationError):
    """Raised when a JavaScript dialog was expected but never appeared."""

    def __init__(self, expected: str, message: Optional[str] = None):
        self.expected = expected
        super().__init__(message or f"No {expected} dialog was shown")


__all__ = [
    "UiAutomationError",
    "ElementNotFoundError",
    "SynchronizationTimeoutError",
    "UnknownPageNameError",
    "OptionNotFoundError",
    "DialogNotHandledError",
]
