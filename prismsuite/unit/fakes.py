"""
In-memory stand-ins for the Playwright objects the framework touches.

`FakePage` keeps a tiny "DOM": a dict from Playwright selector string to
`FakeElement`. Every interaction is appended to `page.calls` so tests can
assert on ordering.
"""

from typing import Dict, List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


class FakeElement:
    def __init__(self, name: str, text: str = "", visible: bool = True, fail: Optional[str] = None):
        self.name = name
        self.text = text
        self.visible = visible
        self.fail = fail
        self.value = "prefilled"
        self.page: Optional["FakePage"] = None

    def _record(self, *entry):
        self.page.calls.append(entry)

    def click(self, timeout=None):
        if self.fail == "click":
            raise PlaywrightTimeoutError("Timeout 10000ms exceeded.")
        self._record("click", self.name)

    def fill(self, value, timeout=None):
        if self.fail == "fill":
            raise PlaywrightError("Element is not an <input>")
        self.value = value
        self._record("fill", self.name, value)

    def inner_text(self, timeout=None):
        self._record("inner_text", self.name)
        return self.text

    def is_visible(self):
        if self.fail == "is_visible":
            raise PlaywrightError("Element is not attached to the DOM")
        self._record("is_visible", self.name)
        return self.visible

    def evaluate(self, script):
        if self.fail == "evaluate":
            raise PlaywrightError("Element is not attached to the DOM")
        self._record("evaluate", self.name, script)


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str):
        self.page = page
        self.selector = selector

    @property
    def first(self):
        return self

    def wait_for(self, state="visible", timeout=None):
        self.page.calls.append(("wait_for", self.selector, state, timeout))
        if self.selector not in self.page.dom:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    def element_handle(self, timeout=None):
        return self.page.dom[self.selector]


class FakePage:
    def __init__(self, titles: Optional[Dict[str, str]] = None):
        self.dom: Dict[str, FakeElement] = {}
        self.calls: List[tuple] = []
        self.titles = titles or {}
        self.history: List[str] = []
        self.position = -1
        self.goto_failures = 0
        self.screenshots = 0

    def add(self, selector: str, element: FakeElement) -> FakeElement:
        element.page = self
        self.dom[selector] = element
        return element

    def locator(self, selector):
        return FakeLocator(self, selector)

    @property
    def url(self) -> str:
        return self.history[self.position] if self.history else "about:blank"

    def goto(self, url, wait_until=None):
        self.calls.append(("goto", url))
        if self.goto_failures:
            self.goto_failures -= 1
            raise PlaywrightError("net::ERR_CONNECTION_RESET")
        del self.history[self.position + 1:]
        self.history.append(url)
        self.position = len(self.history) - 1

    def go_back(self, wait_until=None):
        self.position = max(self.position - 1, 0)

    def go_forward(self, wait_until=None):
        self.position = min(self.position + 1, len(self.history) - 1)

    def title(self):
        return self.titles.get(self.url, "")

    def screenshot(self, full_page=False):
        self.screenshots += 1
        return b"\x89PNG"


class Closeable:
    """Records close()/stop() into a shared list; optionally fails."""

    def __init__(self, label: str, log: List[str], fail: bool = False):
        self.label = label
        self.log = log
        self.fail = fail

    def close(self):
        self.log.append(f"{self.label}.close")
        if self.fail:
            raise PlaywrightError(f"{self.label} already gone")

    def stop(self):
        self.log.append(f"{self.label}.stop")
        if self.fail:
            raise PlaywrightError(f"{self.label} already gone")
