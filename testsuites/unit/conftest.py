"""
Fixtures for offline tests: a fake The Internet page and a fast wait policy.
"""

import pytest

from autotest_tools.common import reset_config
from testsuites.ui_testing.framework.wait_policy import WaitPolicy
from testsuites.ui_testing.pages.home_page import HomePage
from testsuites.unit.fakes import THE_INTERNET, FakePage, FakePlaywright

BASE_URL = "https://the-internet.herokuapp.com"


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Each test starts from defaults, untouched by the developer's env."""
    for key in ("UI__BASE_URL", "UI__BROWSER", "UI__HEADLESS", "UI__WAIT__TIMEOUT", "UI__WAIT__POLL_INTERVAL"):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def fast_policy() -> WaitPolicy:
    return WaitPolicy(timeout=0.3, poll_interval=0.05)


@pytest.fixture
def fake_page() -> FakePage:
    page = FakePage(THE_INTERNET)
    page.load("/")
    return page


@pytest.fixture
def home_page(fake_page, fast_policy) -> HomePage:
    return HomePage(fake_page, base_url=BASE_URL, wait_policy=fast_policy)


@pytest.fixture
def fake_playwright(monkeypatch) -> FakePlaywright:
    driver = FakePlaywright()
    monkeypatch.setattr(
        "testsuites.ui_testing.framework.browser_manager.async_playwright",
        driver,
    )
    return driver
