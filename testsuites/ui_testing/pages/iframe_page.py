"""
================================================================================
Frames Page Objects (Async / Playwright)
================================================================================

``/frames`` lists the frame examples; its "iFrame" link opens ``/iframe``,
a TinyMCE editor whose body lives inside ``#mce_0_ifr``.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import PageBase


class IframeEditorPage(PageBase):
    """TinyMCE editor page object (async)."""

    URL_PATH = "/iframe"
    PAGE_TITLE = "An iFrame containing the TinyMCE WYSIWYG Editor"
    PAGE_KEY = "iframe_editor_page"

    HEADING = Locator("//h3[contains(text(),'An iFrame containing')]", name="iFrame heading")
    EDITOR_BODY = Locator("#tinymce", name="editor body", frame="#mce_0_ifr")

    @allure.step("Verify iFrame page heading is visible")
    async def loading_banner_check(self) -> None:
        await self.wait_for_visible(self.HEADING)

    @allure.step("Read editor content")
    async def get_editor_content(self) -> str:
        return await self.get_text(self.EDITOR_BODY)


class IframePage(PageBase):
    """Frames index page object (async)."""

    URL_PATH = "/frames"
    PAGE_TITLE = "Frames"
    PAGE_KEY = "iframe_page"

    HEADING = Locator("//h3[text()='Frames']", name="Frames heading")
    IFRAME_LINK = Locator("//a[text()='iFrame']", name="iFrame link")

    @allure.step("Verify Frames page heading is visible")
    async def loading_banner_check(self) -> None:
        await self.wait_for_visible(self.HEADING)

    @allure.step("Go to iFrame page")
    async def click_on_iframe_link(self) -> IframeEditorPage:
        await self.click(self.IFRAME_LINK)
        return self.next_page(IframeEditorPage)
