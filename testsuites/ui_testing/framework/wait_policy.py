"""
================================================================================
Fluent Wait Policy
================================================================================

Polling synchronization between the test and asynchronously rendered pages.

A wait resolves a locator against the live page every ``poll_interval``
seconds until the requested condition holds or ``timeout`` elapses.
"Nothing matches yet" is an ignored failure that keeps the loop polling;
anything else propagates at once.

Usage:
    policy = WaitPolicy(timeout=10, poll_interval=2)
    element = await wait_until(page, SUBMIT, WaitCondition.CLICKABLE, policy)
    await element.click()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Type

from loguru import logger
from playwright.async_api import Locator as PlaywrightLocator
from playwright.async_api import Page

from autotest_tools.common import get_float

from .exceptions import ElementNotFoundError, SynchronizationTimeoutError
from .locator import Locator


class WaitCondition(str, Enum):
    """Predicate kinds a wait can block on."""
    VISIBLE = "visible"
    CLICKABLE = "clickable"


@dataclass(frozen=True)
class WaitPolicy:
    """
    Timeout, poll interval and the failures treated as "not yet".

    Attributes:
        timeout: Upper bound of the wait in seconds
        poll_interval: Delay between attempts in seconds
        ignored: Exception types swallowed between attempts
    """
    timeout: float = 10.0
    poll_interval: float = 2.0
    ignored: Tuple[Type[BaseException], ...] = (ElementNotFoundError,)

    def __post_init__(self):
        if self.timeout < 0:
            raise ValueError(f"timeout must be >= 0, got {self.timeout}")
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be > 0, got {self.poll_interval}")

    @classmethod
    def from_config(cls) -> "WaitPolicy":
        """Build the policy from ``ui.wait.*`` configuration."""
        return cls(
            timeout=get_float("ui.wait.timeout", cls.timeout),
            poll_interval=get_float("ui.wait.poll_interval", cls.poll_interval),
        )


async def _check(
    page: Page,
    locator: Locator,
    condition: WaitCondition,
) -> Optional[PlaywrightLocator]:
    """Single poll attempt. Returns the element when the condition holds."""
    matches = locator.resolve(page)
    if await matches.count() == 0:
        raise ElementNotFoundError(locator)

    element = matches.first
    if not await element.is_visible():
        return None
    if condition is WaitCondition.CLICKABLE and not await element.is_enabled():
        return None
    return element


async def wait_until(
    page: Page,
    locator: Locator,
    condition: WaitCondition,
    policy: Optional[WaitPolicy] = None,
) -> PlaywrightLocator:
    """
    Block until the element behind ``locator`` satisfies ``condition``.

    The first attempt is immediate and one final attempt is made once the
    deadline has passed, so the call never takes longer than about
    ``timeout + poll_interval``.

    Args:
        page: Live Playwright page
        locator: Element to wait for
        condition: WaitCondition.VISIBLE or WaitCondition.CLICKABLE
        policy: Wait policy (defaults to configured policy)

    Returns:
        The resolved element, ready for interaction

    Raises:
        SynchronizationTimeoutError: Condition never held within the timeout
    """
    policy = policy or WaitPolicy.from_config()
    condition = WaitCondition(condition)

    deadline = time.monotonic() + policy.timeout
    attempt = 0
    last_error: Optional[BaseException] = None

    while True:
        attempt += 1
        try:
            element = await _check(page, locator, condition)
        except policy.ignored as e:
            last_error = e
            element = None
            logger.debug(f"Attempt {attempt}: {e}")
        else:
            if element is not None:
                logger.debug(f"{locator} is {condition.value} after {attempt} attempt(s)")
                return element
            logger.debug(f"Attempt {attempt}: {locator} present but not {condition.value}")

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        await asyncio.sleep(min(policy.poll_interval, remaining))

    error = SynchronizationTimeoutError(locator, condition.value, policy.timeout, attempt)
    logger.error(str(error))
    raise error from last_error


__all__ = [
    "WaitCondition",
    "WaitPolicy",
    "wait_until",
]
