"""
In-memory stand-ins for the slice of the Playwright async API the suite uses.

FakePage models The Internet as a small site map: ``goto``/link clicks swap
the set of elements on the page, so a locator of the previous page stops
resolving after a navigation, just like in a browser.
"""

from __future__ import annotations

import inspect
import time
from typing import Any, Callable, Dict, List, Optional, Tuple
from urllib.parse import urlparse

from testsuites.ui_testing.framework.locator import Locator
from testsuites.ui_testing.pages import (
    DropDownPage,
    HomePage,
    IframeEditorPage,
    IframePage,
    JavaScriptAlertPage,
)


class FakeElement:
    def __init__(
        self,
        text: str = "",
        visible: bool = True,
        enabled: bool = True,
        options: Optional[List[str]] = None,
        disabled_options: Optional[List[str]] = None,
        on_click: Optional[Callable[[], Any]] = None,
    ):
        self.text = text
        self.visible = visible
        self.enabled = enabled
        self.options = list(options or [])
        self.disabled_options = set(disabled_options or [])
        self.selected = self.options[0] if self.options else None
        self.on_click = on_click
        self.clicks = 0
        self.appears_at = 0.0
        self.error: Optional[BaseException] = None


class FakeDialog:
    def __init__(self, type: str, message: str):
        self.type = type
        self.message = message
        self.accepted: Optional[bool] = None
        self.prompt_text: Optional[str] = None

    async def accept(self, prompt_text: Optional[str] = None) -> None:
        self.accepted = True
        self.prompt_text = prompt_text

    async def dismiss(self) -> None:
        self.accepted = False


class _FakeChildLocator:
    """``select.locator("option")`` and ``select.locator("option:checked")``."""

    def __init__(self, element: FakeElement, selector: str):
        self.element = element
        self.selector = selector

    async def all_inner_texts(self) -> List[str]:
        if ":not([disabled])" in self.selector:
            return [o for o in self.element.options if o not in self.element.disabled_options]
        return list(self.element.options)

    async def inner_text(self) -> str:
        return self.element.selected or ""


class FakeLocator:
    def __init__(self, page: "FakePage", query: str, frame: Optional[str] = None):
        self.page = page
        self.query = query
        self.frame = frame

    def _element(self) -> Optional[FakeElement]:
        return self.page.find(self.query, self.frame)

    def _require(self) -> FakeElement:
        element = self._element()
        if element is None:
            raise AssertionError(f"interaction with missing element {self.query}")
        return element

    async def count(self) -> int:
        self.page.queries += 1
        return 0 if self._element() is None else 1

    @property
    def first(self) -> "FakeLocator":
        return self

    async def is_visible(self) -> bool:
        element = self._require()
        if element.error is not None:
            raise element.error
        return element.visible

    async def is_enabled(self) -> bool:
        return self._require().enabled

    async def click(self) -> None:
        element = self._require()
        element.clicks += 1
        if element.on_click is not None:
            result = element.on_click()
            if inspect.isawaitable(result):
                await result

    async def inner_text(self) -> str:
        return self._require().text

    def locator(self, selector: str) -> _FakeChildLocator:
        return _FakeChildLocator(self._require(), selector)

    async def select_option(self, label: Optional[str] = None) -> List[str]:
        element = self._require()
        if label not in element.options or label in element.disabled_options:
            raise TimeoutError(f"option {label!r} never became selectable")
        element.selected = label
        return [label]


class FakeFrameLocator:
    def __init__(self, page: "FakePage", frame: str):
        self.page = page
        self.frame = frame

    def locator(self, query: str) -> FakeLocator:
        return FakeLocator(self.page, query, frame=self.frame)


class FakePage:
    """A Playwright page whose DOM is a dict of (selector, frame) -> FakeElement."""

    def __init__(self, site: Optional[Dict[str, Callable[["FakePage"], None]]] = None):
        self.site = site or {}
        self.elements: Dict[Tuple[str, Optional[str]], FakeElement] = {}
        self.url = "about:blank"
        self.visited: List[str] = []
        self.queries = 0
        self.closed = False
        self._once: Dict[str, List[Callable]] = {}

    # -- DOM -------------------------------------------------------------

    def add(self, locator: Locator, element: FakeElement, delay: float = 0.0) -> FakeElement:
        element.appears_at = time.monotonic() + delay
        self.elements[(locator.selector, locator.frame)] = element
        return element

    def element(self, locator: Locator) -> FakeElement:
        return self.elements[(locator.selector, locator.frame)]

    def find(self, query: str, frame: Optional[str] = None) -> Optional[FakeElement]:
        selector = query.split("=", 1)[1] if query.startswith(("xpath=", "css=")) else query
        element = self.elements.get((selector, frame))
        if element is None or time.monotonic() < element.appears_at:
            return None
        return element

    def load(self, path: str) -> None:
        self.elements.clear()
        self.url = f"https://the-internet.herokuapp.com{path}"
        self.visited.append(path)
        builder = self.site.get(path)
        if builder is not None:
            builder(self)

    # -- Playwright API ---------------------------------------------------

    def locator(self, query: str) -> FakeLocator:
        return FakeLocator(self, query)

    def frame_locator(self, frame: str) -> FakeFrameLocator:
        return FakeFrameLocator(self, frame)

    async def goto(self, url: str, wait_until: Optional[str] = None) -> None:
        self.load(urlparse(url).path or "/")

    def once(self, event: str, handler: Callable) -> None:
        self._once.setdefault(event, []).append(handler)

    def remove_listener(self, event: str, handler: Callable) -> None:
        if handler in self._once.get(event, []):
            self._once[event].remove(handler)

    def listener_count(self, event: str) -> int:
        return len(self._once.get(event, []))

    async def emit_dialog(self, dialog: FakeDialog) -> None:
        handlers = self._once.pop("dialog", [])
        if not handlers:
            # Playwright auto-dismisses dialogs nobody listens for.
            await dialog.dismiss()
        for handler in handlers:
            await handler(dialog)

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        return b"\x89PNG fake"

    async def close(self) -> None:
        self.closed = True


# =============================================================================
# The Internet site map
# =============================================================================

def _link(page: FakePage, locator: Locator, target: str) -> None:
    page.add(locator, FakeElement(text=locator.name, on_click=lambda: page.load(target)))


def _home(page: FakePage) -> None:
    page.add(HomePage.BANNER, FakeElement(text="Welcome to the-internet"))
    _link(page, HomePage.DROPDOWN_LINK, "/dropdown")
    _link(page, HomePage.JS_ALERT_LINK, "/javascript_alerts")
    _link(page, HomePage.IFRAME_LINK, "/frames")


def _dropdown(page: FakePage) -> None:
    page.add(DropDownPage.HEADING, FakeElement(text="Dropdown List"))
    page.add(
        DropDownPage.DROPDOWN,
        FakeElement(
            options=["Please select an option", "Option 1", "Option 2"],
            disabled_options=["Please select an option"],
        ),
    )


def _javascript_alerts(page: FakePage) -> None:
    page.add(JavaScriptAlertPage.HEADING, FakeElement(text="JavaScript Alerts"))
    result = page.add(JavaScriptAlertPage.RESULT, FakeElement(text=""))

    async def alert():
        await page.emit_dialog(FakeDialog("alert", "I am a JS Alert"))
        result.text = "You successfully clicked an alert"

    async def confirm():
        dialog = FakeDialog("confirm", "I am a JS Confirm")
        await page.emit_dialog(dialog)
        result.text = "You clicked: Ok" if dialog.accepted else "You clicked: Cancel"

    async def prompt():
        dialog = FakeDialog("prompt", "I am a JS prompt")
        await page.emit_dialog(dialog)
        result.text = f"You entered: {dialog.prompt_text if dialog.accepted else 'null'}"

    page.add(JavaScriptAlertPage.JS_ALERT_BUTTON, FakeElement(on_click=alert))
    page.add(JavaScriptAlertPage.JS_CONFIRM_BUTTON, FakeElement(on_click=confirm))
    page.add(JavaScriptAlertPage.JS_PROMPT_BUTTON, FakeElement(on_click=prompt))


def _frames(page: FakePage) -> None:
    page.add(IframePage.HEADING, FakeElement(text="Frames"))
    _link(page, IframePage.IFRAME_LINK, "/iframe")


def _iframe(page: FakePage) -> None:
    page.add(
        IframeEditorPage.HEADING,
        FakeElement(text="An iFrame containing the TinyMCE WYSIWYG Editor"),
    )
    page.add(IframeEditorPage.EDITOR_BODY, FakeElement(text="Your content goes here."))


THE_INTERNET = {
    "/": _home,
    "/dropdown": _dropdown,
    "/javascript_alerts": _javascript_alerts,
    "/frames": _frames,
    "/iframe": _iframe,
}


# =============================================================================
# Fake Playwright driver (for BrowserManager)
# =============================================================================

class FakeContext:
    def __init__(self, browser: "FakeBrowser", options: Dict[str, Any]):
        self.browser = browser
        self.options = options
        self.closed = 0

    async def new_page(self) -> FakePage:
        return FakePage(THE_INTERNET)

    async def close(self) -> None:
        self.closed += 1


class FakeBrowser:
    def __init__(self, name: str, options: Dict[str, Any]):
        self.name = name
        self.launch_options = options
        self.contexts: List[FakeContext] = []
        self.closed = 0

    async def new_context(self, **options: Any) -> FakeContext:
        context = FakeContext(self, options)
        self.contexts.append(context)
        return context

    async def close(self) -> None:
        self.closed += 1


class _FakeLauncher:
    def __init__(self, driver: "FakePlaywright", name: str):
        self.driver = driver
        self.name = name

    async def launch(self, **options: Any) -> FakeBrowser:
        browser = FakeBrowser(self.name, options)
        self.driver.browsers.append(browser)
        return browser


class FakePlaywright:
    """Replaces ``async_playwright`` for the browser manager; records every launch."""

    def __init__(self):
        self.browsers: List[FakeBrowser] = []
        self.started = 0
        self.stopped = 0
        self.chromium = _FakeLauncher(self, "chromium")
        self.firefox = _FakeLauncher(self, "firefox")
        self.webkit = _FakeLauncher(self, "webkit")

    def __call__(self) -> "FakePlaywright":
        return self

    async def start(self) -> "FakePlaywright":
        self.started += 1
        return self

    async def stop(self) -> None:
        self.stopped += 1
