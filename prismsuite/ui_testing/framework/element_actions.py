# ================================================================================
# Element Actions Module
# ================================================================================
#
# Free functions shared by all page objects: navigate, find, click, type,
# read text, read displayed-state and scroll-into-view.
#
# Every function takes the scenario's BrowserSession explicitly and logs
# through the session's bound logger. Playwright errors are translated into
# the framework's exception taxonomy at this boundary.
#
# Key Features:
#   - Explicit element resolution at call time
#   - Clear-then-type input handling
#   - Script-bridge scroll into view
#   - Optional retry with backoff for page loads
#   - Allure step integration
#
# ================================================================================

import time
from dataclasses import dataclass
from typing import Callable, TypeVar

import allure
from playwright.sync_api import ElementHandle
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .browser_manager import BrowserSession
from .exceptions import ElementNotInteractableError, NavigationError
from .locators import Locator, LocatorTable, resolve


T = TypeVar("T")

SCROLL_INTO_VIEW_SCRIPT = "el => el.scrollIntoView(true)"


class RetryConfig:
    """Configuration for retry behavior."""

    def __init__(
        self,
        max_attempts: int = 3,
        delay_seconds: float = 1.0,
        backoff_multiplier: float = 2.0,
        max_delay_seconds: float = 10.0
    ):
        """
        Initialize retry configuration.

        Args:
            max_attempts: Maximum number of attempts (1 means no retry)
            delay_seconds: Initial delay between retries
            backoff_multiplier: Multiplier for exponential backoff
            max_delay_seconds: Maximum delay between retries
        """
        self.max_attempts = max_attempts
        self.delay_seconds = delay_seconds
        self.backoff_multiplier = backoff_multiplier
        self.max_delay_seconds = max_delay_seconds


def call_with_retry(
    func: Callable[[], T],
    config: RetryConfig,
    description: str,
    log,
    retry_on: tuple = (NavigationError,),
) -> T:
    """
    Call `func` until it succeeds or the attempts run out.

    Only exceptions in `retry_on` are retried, anything else propagates
    immediately. The last failure is re-raised.
    """
    delay = config.delay_seconds
    attempt = 1
    while True:
        try:
            return func()
        except retry_on as e:
            if attempt >= config.max_attempts:
                if config.max_attempts > 1:
                    log.error(f"All {config.max_attempts} attempts failed for {description}: {e}")
                raise
            log.warning(
                f"Attempt {attempt}/{config.max_attempts} failed for "
                f"{description}: {e}. Retrying in {delay}s..."
            )
            time.sleep(delay)
            delay = min(delay * config.backoff_multiplier, config.max_delay_seconds)
            attempt += 1


@dataclass(frozen=True)
class Element:
    """A live element handle together with the name and locator it came from."""

    name: str
    locator: Locator
    handle: ElementHandle


def navigate_to(session: BrowserSession, url: str) -> None:
    """
    Load `url` in the session's page.

    Raises:
        NavigationError: The page did not load within the page-load timeout
            (after `ui.navigation_attempts` tries).
    """
    def _goto() -> None:
        try:
            session.page.goto(url, wait_until="load")
        except PlaywrightError as e:
            raise NavigationError(url, str(e)) from e

    session.log.info(f"Navigating to: {url}")
    with allure.step(f"Navigate to {url}"):
        call_with_retry(
            _goto,
            RetryConfig(max_attempts=session.settings.navigation_attempts),
            f"navigate to {url}",
            session.log,
        )


def find(session: BrowserSession, locators: LocatorTable, name: str) -> Element:
    """Resolve the named locator now, against the current DOM."""
    locator = locators[name]
    session.log.debug(f"Resolving {name}: {locator}")
    handle = resolve(session.page, name, locator, session.implicit_wait_ms)
    return Element(name=name, locator=locator, handle=handle)


def click(session: BrowserSession, element: Element) -> None:
    """Click an element, waiting for it to become actionable."""
    session.log.info(f"Clicking element: {element.name}")
    with allure.step(f"Click: {element.name}"):
        try:
            element.handle.click(timeout=session.implicit_wait_ms)
        except PlaywrightError as e:
            raise ElementNotInteractableError(
                element.name, str(element.locator), "click", _reason(e)
            ) from e


def type_text(session: BrowserSession, element: Element, text: str) -> None:
    """Clear the field and type `text` into it. No validation of `text`."""
    session.log.info(f"Typing in {element.name}: {text}")
    with allure.step(f"Type into {element.name}: {text}"):
        try:
            element.handle.fill("", timeout=session.implicit_wait_ms)
            element.handle.fill(text, timeout=session.implicit_wait_ms)
        except PlaywrightError as e:
            raise ElementNotInteractableError(
                element.name, str(element.locator), "type into", _reason(e)
            ) from e


def read_text(session: BrowserSession, element: Element) -> str:
    """Rendered text of an element."""
    try:
        text = element.handle.inner_text(timeout=session.implicit_wait_ms)
    except PlaywrightError as e:
        raise ElementNotInteractableError(
            element.name, str(element.locator), "read text of", _reason(e)
        ) from e
    session.log.debug(f"Got text from {element.name}: '{text}'")
    return text


def is_displayed(session: BrowserSession, element: Element) -> bool:
    """Whether the element is currently rendered visible."""
    try:
        visible = element.handle.is_visible()
    except PlaywrightError as e:
        raise ElementNotInteractableError(
            element.name, str(element.locator), "check visibility of", _reason(e)
        ) from e
    session.log.debug(f"{element.name} displayed: {visible}")
    return visible


def scroll_into_view(session: BrowserSession, element: Element) -> None:
    """Scroll the element into view through the page's script bridge."""
    with allure.step(f"Scroll to {element.name}"):
        try:
            element.handle.evaluate(SCROLL_INTO_VIEW_SCRIPT)
        except PlaywrightError as e:
            raise ElementNotInteractableError(
                element.name, str(element.locator), "scroll to", _reason(e)
            ) from e
    session.log.debug(f"Scrolled {element.name} into view")


def _reason(error: PlaywrightError) -> str:
    if isinstance(error, PlaywrightTimeoutError):
        return "timed out"
    return error.message


__all__ = [
    "RetryConfig",
    "call_with_retry",
    "Element",
    "navigate_to",
    "find",
    "click",
    "type_text",
    "read_text",
    "is_displayed",
    "scroll_into_view",
]
