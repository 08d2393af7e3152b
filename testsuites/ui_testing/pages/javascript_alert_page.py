"""
================================================================================
JavaScript Alerts Page Object (Async / Playwright)
================================================================================

``/javascript_alerts``: three buttons that open ``alert``, ``confirm`` and
``prompt`` dialogs, and a ``#result`` paragraph describing what happened.

Playwright dismisses dialogs nobody listens for, and a listener must answer
the dialog or the page stalls. Each click therefore arms a one-shot handler
*before* clicking, and the handler answers the dialog as instructed.

================================================================================
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

import allure
from loguru import logger
from playwright.async_api import Dialog

from testsuites.ui_testing.framework.exceptions import DialogNotHandledError
from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.framework.page_base import PageBase


class JavaScriptAlertPage(PageBase):
    """JavaScript Alerts page object (async)."""

    URL_PATH = "/javascript_alerts"
    PAGE_TITLE = "JavaScript Alerts"
    PAGE_KEY = "javascript_alert_page"

    HEADING = Locator("//h3[text()='JavaScript Alerts']", name="JavaScript Alerts heading")
    JS_ALERT_BUTTON = Locator("//button[text()='Click for JS Alert']", name="JS Alert button")
    JS_CONFIRM_BUTTON = Locator("//button[text()='Click for JS Confirm']", name="JS Confirm button")
    JS_PROMPT_BUTTON = Locator("//button[text()='Click for JS Prompt']", name="JS Prompt button")
    RESULT = Locator("#result", name="result")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.last_dialog_type: Optional[str] = None
        self.last_dialog_message: Optional[str] = None
        self._dialog_handled = asyncio.Event()

    def _arm_dialog_handler(self, accept: bool, prompt_text: Optional[str] = None) -> Callable:
        self._dialog_handled.clear()

        async def handle(dialog: Dialog) -> None:
            self.last_dialog_type = dialog.type
            self.last_dialog_message = dialog.message
            logger.info(f"{dialog.type} dialog: {dialog.message!r} (accept={accept})")
            if not accept:
                await dialog.dismiss()
            elif prompt_text is not None:
                await dialog.accept(prompt_text)
            else:
                await dialog.accept()
            self._dialog_handled.set()

        self.page.once("dialog", handle)
        return handle

    async def _click_answering_dialog(
        self, button: Locator, accept: bool, prompt_text: Optional[str] = None
    ) -> None:
        """Click ``button`` with a dialog handler armed; a failed click disarms it again."""
        handle = self._arm_dialog_handler(accept, prompt_text)
        try:
            await self.click(button)
        except Exception:
            self.page.remove_listener("dialog", handle)
            raise

    @allure.step("Verify JavaScript Alerts page heading is visible")
    async def loading_banner_check(self) -> None:
        await self.wait_for_visible(self.HEADING)

    @allure.step("Click JS Alert button")
    async def click_js_alert_button(self) -> None:
        await self._click_answering_dialog(self.JS_ALERT_BUTTON, accept=True)

    @allure.step("Click JS Confirm button")
    async def click_js_confirm_button(self, accept: bool = True) -> None:
        await self._click_answering_dialog(self.JS_CONFIRM_BUTTON, accept=accept)

    @allure.step("Click JS Prompt button")
    async def click_js_prompt_button(self, text: Optional[str] = None) -> None:
        """Answer the prompt with ``text``, or dismiss it when ``text`` is None."""
        await self._click_answering_dialog(self.JS_PROMPT_BUTTON, accept=text is not None, prompt_text=text)

    async def wait_for_dialog(self, expected_type: str) -> str:
        """
        Wait until the armed handler has answered a dialog of ``expected_type``.

        Returns:
            The dialog message

        Raises:
            DialogNotHandledError: No dialog, or a dialog of another type
        """
        try:
            await asyncio.wait_for(self._dialog_handled.wait(), self.wait_policy.timeout)
        except asyncio.TimeoutError:
            raise DialogNotHandledError(expected_type) from None

        if self.last_dialog_type != expected_type:
            raise DialogNotHandledError(
                expected_type,
                f"Expected a {expected_type} dialog, got {self.last_dialog_type}",
            )
        return self.last_dialog_message or ""

    @allure.step("Accept the alert popup")
    async def accept_alert(self) -> str:
        """
        Confirm the alert opened by ``click_js_alert_button`` was accepted.

        Returns:
            The result text the page shows after the alert closed
        """
        await self.wait_for_dialog("alert")
        return await self.get_result_text()

    async def get_result_text(self) -> str:
        return await self.get_text(self.RESULT)
