"""
Step definitions for The Internet feature files.

Every step maps one sentence to one page-object call. State lives on
``context.ui`` (a ScenarioContext created fresh for each scenario), never on
module globals.
"""

from behave import given, step, then, when

from testsuites.ui_testing.pages import (
    DropDownPage,
    HomePage,
    IframeEditorPage,
    IframePage,
    JavaScriptAlertPage,
)

ALERT_ACCEPTED_RESULT = "You successfully clicked an alert"


@given("I navigate to The Internet Herokuapp")
def step_navigate_to_the_internet(context):
    ui = context.ui
    home_page = HomePage(ui.page)
    ui.run(home_page.open())
    ui.visit(home_page)


@then("I should see the landing page banner")
def step_see_landing_banner(context):
    ui = context.ui
    ui.run(ui.get_page(HomePage.PAGE_KEY).loading_banner_check())


@when('I go to the "{page_name}" page')
def step_go_to_page(context, page_name):
    ui = context.ui
    home_page = ui.get_page(HomePage.PAGE_KEY)
    ui.visit(ui.run(home_page.go_to(page_name)))


@then("I should see the page heading")
def step_see_page_heading(context):
    ui = context.ui
    ui.run(ui.current_page.loading_banner_check())


@then("I click the JS Alert button")
def step_click_js_alert_button(context):
    ui = context.ui
    ui.run(ui.get_page(JavaScriptAlertPage.PAGE_KEY).click_js_alert_button())


@then("I accept the alert popup")
def step_accept_alert_popup(context):
    ui = context.ui
    result = ui.run(ui.get_page(JavaScriptAlertPage.PAGE_KEY).accept_alert())
    assert result == ALERT_ACCEPTED_RESULT, f"Unexpected result text: {result!r}"


@step("I click on the iFrame link")
def step_click_iframe_link(context):
    ui = context.ui
    ui.visit(ui.run(ui.get_page(IframePage.PAGE_KEY).click_on_iframe_link()))


@then("I should see the message Your content goes here")
def step_see_editor_message(context):
    ui = context.ui
    content = ui.run(ui.get_page(IframeEditorPage.PAGE_KEY).get_editor_content())
    assert "Your content goes here" in content, f"Unexpected editor content: {content!r}"


@when('I select "{option}" from the dropdown')
def step_select_dropdown_option(context, option):
    ui = context.ui
    ui.run(ui.get_page(DropDownPage.PAGE_KEY).select_dropdown_by_value(option))


@then('the selected dropdown option should be "{option}"')
def step_selected_option_is(context, option):
    ui = context.ui
    selected = ui.run(ui.get_page(DropDownPage.PAGE_KEY).get_selected_option())
    assert selected == option, f"Expected {option!r} selected, got {selected!r}"
