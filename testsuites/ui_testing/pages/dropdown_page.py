"""
================================================================================
Dropdown Page Object (Async / Playwright)
================================================================================

``/dropdown``: a heading and a single ``<select id="dropdown">`` with
"Option 1" and "Option 2".

================================================================================
"""

from __future__ import annotations

from typing import List

import allure
from loguru import logger

from testsuites.ui_testing.framework.exceptions import OptionNotFoundError
from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import PageBase


class DropDownPage(PageBase):
    """Dropdown page object (async)."""

    URL_PATH = "/dropdown"
    PAGE_TITLE = "Dropdown List"
    PAGE_KEY = "dropdown_page"

    HEADING = Locator("//h3[contains(text(),'Dropdown List')]", name="Dropdown List heading")
    DROPDOWN = Locator("#dropdown", name="dropdown")
    SELECTABLE_OPTIONS = "option:not([disabled])"

    @allure.step("Verify Dropdown page heading is visible")
    async def loading_banner_check(self) -> None:
        await self.wait_for_visible(self.HEADING)

    async def get_options(self) -> List[str]:
        """Visible texts of all options, in document order."""
        select = await self.wait_for_visible(self.DROPDOWN)
        return [text.strip() for text in await select.locator("option").all_inner_texts()]

    @allure.step("Select dropdown option {value}")
    async def select_dropdown_by_value(self, value: str) -> None:
        """
        Select the option whose visible text is ``value``.

        Raises:
            OptionNotFoundError: The dropdown has no such enabled option
        """
        select = await self.wait_for_clickable(self.DROPDOWN)
        # The "Please select an option" placeholder is disabled and cannot be chosen
        options = [
            text.strip() for text in await select.locator(self.SELECTABLE_OPTIONS).all_inner_texts()
        ]
        if value not in options:
            raise OptionNotFoundError(value, options)

        await select.select_option(label=value)
        logger.debug(f"Selected dropdown option: {value}")

    async def get_selected_option(self) -> str:
        """Visible text of the currently selected option."""
        select = await self.wait_for_visible(self.DROPDOWN)
        return (await select.locator("option:checked").inner_text()).strip()
