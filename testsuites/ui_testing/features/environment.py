"""
================================================================================
Behave Environment Hooks
================================================================================

Lifecycle of the BDD run:

- before_all:       logging + ``-D key=value`` userdata into config
- before_scenario:  new ScenarioContext -> own event loop, own browser
- after_step:       screenshot + URL attached to Allure on failure
- after_scenario:   browser and loop released, whatever the outcome

Usage:
    behave testsuites/ui_testing/features -D browser=firefox -D headless=false

================================================================================
"""

from loguru import logger

from autotest_tools.common import init_logger, set_config
from autotest_tools.report_tools.allure_utils import attach_png, attach_text
from testsuites.ui_testing.framework.scenario_context import ScenarioContext


# behave userdata key -> configuration key
USERDATA_KEYS = {
    "base_url": "ui.base_url",
    "browser": "ui.browser",
    "headless": "ui.headless",
    "timeout": "ui.wait.timeout",
    "poll_interval": "ui.wait.poll_interval",
}


def before_all(context):
    init_logger()
    for key, config_key in USERDATA_KEYS.items():
        if key in context.config.userdata:
            set_config(config_key, context.config.userdata[key])
            logger.info(f"Userdata override: {config_key}={context.config.userdata[key]}")


def before_scenario(context, scenario):
    ui = ScenarioContext(name=scenario.name)
    context.ui = ui
    logger.info(f"Scenario started: {scenario.name}")
    try:
        ui.run(ui.open())
    except Exception:
        ui.close()
        raise


def after_step(context, step):
    if step.status != "failed":
        return
    ui = getattr(context, "ui", None)
    if ui is None or ui.page is None:
        return
    try:
        attach_png(ui.run(ui.page.screenshot(full_page=True)), name=f"failure_{step.name}")
        attach_text(ui.page.url, name="Current URL")
    except Exception as e:
        logger.warning(f"Failed to capture screenshot on failure: {e}")


def after_scenario(context, scenario):
    ui = getattr(context, "ui", None)
    if ui is not None:
        ui.close()
    status = getattr(scenario.status, "name", scenario.status)
    logger.info(f"Scenario finished: {scenario.name} -> {status}")
