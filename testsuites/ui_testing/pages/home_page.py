"""
================================================================================
Home Page Object (Async / Playwright)
================================================================================

Landing page of The Internet demo site: a heading and a list of links to
the example pages. Every link is a transition to another page object.

================================================================================
"""

from __future__ import annotations

from typing import Dict

import allure
from loguru import logger

from testsuites.ui_testing.framework.exceptions import UnknownPageNameError
from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.pages.dropdown_page import DropDownPage
from testsuites.ui_testing.pages.iframe_page import IframePage
from testsuites.ui_testing.pages.javascript_alert_page import JavaScriptAlertPage


class HomePage(PageBase):
    """Landing page object (async)."""

    URL_PATH = "/"
    PAGE_TITLE = "The Internet"
    PAGE_KEY = "home_page"

    BANNER = Locator("//h1[@class='heading']", name="banner")
    DROPDOWN_LINK = Locator("//a[contains(text(),'Dropdown')]", name="Dropdown link")
    JS_ALERT_LINK = Locator("//a[contains(text(),'JavaScript Alerts')]", name="JavaScript Alerts link")
    IFRAME_LINK = Locator("(//a[contains(text(),'Frames')])[1]", name="Frames link")

    # Page name (as written in feature files) -> transition method
    NAVIGATION: Dict[str, str] = {
        "Dropdown": "click_on_dropdown_link",
        "JavaScriptAlert": "click_on_javascript_alert_link",
        "iframe": "click_on_iframe_link",
    }

    @allure.step("Open landing page")
    async def open(self) -> "HomePage":
        """Navigate to the landing page."""
        await self.navigate()
        return self

    @allure.step("Verify landing banner is visible")
    async def loading_banner_check(self) -> None:
        await self.wait_for_visible(self.BANNER)

    @allure.step("Go to Dropdown page")
    async def click_on_dropdown_link(self) -> DropDownPage:
        await self.click(self.DROPDOWN_LINK)
        return self.next_page(DropDownPage)

    @allure.step("Go to JavaScript Alerts page")
    async def click_on_javascript_alert_link(self) -> JavaScriptAlertPage:
        await self.click(self.JS_ALERT_LINK)
        return self.next_page(JavaScriptAlertPage)

    @allure.step("Go to Frames page")
    async def click_on_iframe_link(self) -> IframePage:
        await self.click(self.IFRAME_LINK)
        return self.next_page(IframePage)

    async def go_to(self, page_name: str) -> PageBase:
        """
        Follow the link registered for ``page_name`` in NAVIGATION.

        Exactly one transition runs for a known name. An unknown name fails
        before anything on the page is touched.

        Raises:
            UnknownPageNameError: No transition is registered for the name
        """
        method_name = self.NAVIGATION.get(page_name)
        if method_name is None:
            raise UnknownPageNameError(page_name, self.NAVIGATION)

        logger.info(f"Navigating from landing page to {page_name!r}")
        return await getattr(self, method_name)()
