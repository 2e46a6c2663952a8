"""
================================================================================
Locators
================================================================================

Static element locators and their explicit resolution.

A page declares a `LocatorTable` of logical name -> `Locator`. Nothing is
looked up when the table is built; `resolve()` turns a locator into a live
element handle at the moment an operation needs it, so a re-rendered page
is always queried afresh.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, Mapping

from playwright.sync_api import ElementHandle, Page
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .exceptions import ElementNotFoundError


class By(str, Enum):
    """Selector strategies understood by the resolver."""

    XPATH = "xpath"
    CSS = "css"
    LINK_TEXT = "link_text"
    PARTIAL_LINK_TEXT = "partial_link_text"


@dataclass(frozen=True)
class Locator:
    """
    An immutable (strategy, selector) pair.

    Attributes:
        by: Selector strategy
        selector: Selector string in that strategy's syntax
    """

    by: By
    selector: str

    def to_playwright(self) -> str:
        """Translate to a Playwright selector string."""
        if self.by is By.XPATH:
            return f"xpath={self.selector}"
        if self.by is By.CSS:
            return f"css={self.selector}"
        if self.by is By.LINK_TEXT:
            return f"a:text-is({json.dumps(self.selector)})"
        if self.by is By.PARTIAL_LINK_TEXT:
            return f"a:has-text({json.dumps(self.selector)})"
        raise ValueError(f"Unknown locator strategy: {self.by}")

    def __str__(self) -> str:
        return f"{self.by.value}={self.selector}"


class LocatorTable(Mapping[str, Locator]):
    """Read-only mapping of logical element names to locators."""

    def __init__(self, locators: Dict[str, Locator]):
        self._locators = MappingProxyType(dict(locators))

    def __getitem__(self, name: str) -> Locator:
        try:
            return self._locators[name]
        except KeyError:
            raise KeyError(
                f"Unknown element '{name}'. Known: {sorted(self._locators)}"
            ) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._locators)

    def __len__(self) -> int:
        return len(self._locators)


def resolve(
    page: Page,
    name: str,
    locator: Locator,
    timeout_ms: int,
) -> ElementHandle:
    """
    Resolve a locator to the first matching live element.

    Waits up to `timeout_ms` for the element to be attached to the DOM.

    Args:
        page: Playwright page to query
        name: Logical element name, used in errors
        locator: Locator to resolve
        timeout_ms: Implicit wait window in milliseconds

    Returns:
        ElementHandle for the first match

    Raises:
        ElementNotFoundError: Nothing matched within the wait window
    """
    selector = locator.to_playwright()
    target = page.locator(selector).first
    try:
        target.wait_for(state="attached", timeout=timeout_ms)
        handle = target.element_handle(timeout=timeout_ms)
    except PlaywrightTimeoutError as e:
        raise ElementNotFoundError(name, str(locator), timeout_ms) from e
    except PlaywrightError as e:
        # Detached between wait and grab, treat like a miss
        raise ElementNotFoundError(name, str(locator), timeout_ms) from e

    if handle is None:
        raise ElementNotFoundError(name, str(locator), timeout_ms)
    return handle


__all__ = [
    "By",
    "Locator",
    "LocatorTable",
    "resolve",
]
