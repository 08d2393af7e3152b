"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework.

Components:
    - locator: Named XPath/CSS selectors, optionally scoped to an iframe
    - wait_policy: Fluent wait (timeout, poll interval, ignored failures)
    - page_base: Base page object with wait primitives
    - browser_manager: Browser lifecycle management
    - scenario_context: Per-scenario state for BDD steps
    - exceptions: Failure taxonomy

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager, browser_session
from .exceptions import (
    DialogNotHandledError,
    ElementNotFoundError,
    OptionNotFoundError,
    SynchronizationTimeoutError,
    UiAutomationError,
    UnknownPageNameError,
)
from .locator import Locator
from .page_base import BasePage
from .scenario_context import ScenarioContext
from .wait_policy import WaitCondition, WaitPolicy, wait_until

__all__ = [
    "BasePage",
    "BrowserManager",
    "DialogNotHandledError",
    "ElementNotFoundError",
    "Locator",
    "OptionNotFoundError",
    "ScenarioContext",
    "SynchronizationTimeoutError",
    "UiAutomationError",
    "UnknownPageNameError",
    "WaitCondition",
    "WaitPolicy",
    "browser_session",
    "wait_until",
]
