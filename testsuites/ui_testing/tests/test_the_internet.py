"""
================================================================================
The Internet UI Tests (Async / Playwright)
================================================================================

Live end-to-end checks against the demo site:
  - Dropdown selection (landing -> Dropdown -> select)
  - JavaScript alert acceptance
  - Text inside the TinyMCE iframe

Run with ``pytest --live`` (or ``UI_LIVE=1``); skipped otherwise.

================================================================================
"""

import allure
import pytest

from testsuites.ui_testing.framework.exceptions import OptionNotFoundError
from testsuites.ui_testing.pages.home_page import HomePage


@allure.epic("UI Testing")
@allure.feature("Dropdown")
class TestDropdown:
    """Dropdown UI test suite (async)."""

    @allure.story("Selection")
    @allure.title("Select Option 2 after a client-side page change")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_client_side_delay(self, home_page: HomePage):
        await home_page.loading_banner_check()
        dropdown_page = await home_page.click_on_dropdown_link()
        await dropdown_page.loading_banner_check()

        await dropdown_page.select_dropdown_by_value("Option 2")

        assert await dropdown_page.get_selected_option() == "Option 2"

    @allure.story("Selection")
    @allure.title("Selecting a missing option fails")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_missing_option_fails(self, home_page: HomePage):
        dropdown_page = await home_page.click_on_dropdown_link()

        with pytest.raises(OptionNotFoundError):
            await dropdown_page.select_dropdown_by_value("Option 3")


@allure.epic("UI Testing")
@allure.feature("JavaScript Alerts")
class TestJavaScriptAlerts:
    """JavaScript dialog UI test suite (async)."""

    @allure.story("Alert")
    @allure.title("JS alert is accepted")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_accept_alert(self, home_page: HomePage):
        alert_page = await home_page.go_to("JavaScriptAlert")
        await alert_page.loading_banner_check()

        await alert_page.click_js_alert_button()

        assert await alert_page.accept_alert() == "You successfully clicked an alert"
        assert alert_page.last_dialog_message == "I am a JS Alert"

    @allure.story("Confirm")
    @allure.title("JS confirm can be cancelled")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.asyncio
    async def test_dismiss_confirm(self, home_page: HomePage):
        alert_page = await home_page.go_to("JavaScriptAlert")

        await alert_page.click_js_confirm_button(accept=False)
        await alert_page.wait_for_dialog("confirm")

        assert await alert_page.get_result_text() == "You clicked: Cancel"

    @allure.story("Prompt")
    @allure.title("JS prompt echoes the entered text")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.asyncio
    async def test_answer_prompt(self, home_page: HomePage):
        alert_page = await home_page.go_to("JavaScriptAlert")

        await alert_page.click_js_prompt_button("automation")
        await alert_page.wait_for_dialog("prompt")

        assert await alert_page.get_result_text() == "You entered: automation"


@allure.epic("UI Testing")
@allure.feature("Frames")
class TestIframe:
    """iFrame UI test suite (async)."""

    @allure.story("Editor")
    @allure.title("Editor inside the iframe shows its default content")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.asyncio
    async def test_iframe_content(self, home_page: HomePage):
        frames_page = await home_page.go_to("iframe")
        await frames_page.loading_banner_check()
        editor_page = await frames_page.click_on_iframe_link()
        await editor_page.loading_banner_check()

        assert "Your content goes here" in await editor_page.get_editor_content()
