"""
================================================================================
Browser Manager
================================================================================

Browser session lifecycle for UI scenarios.

Features:
    - One fresh, maximized browser per scenario
    - Implicit wait installed as the context default timeout
    - Guaranteed teardown that never masks the scenario result
    - Provisioning faults reported as infrastructure errors

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from loguru import logger
from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from suite_tools.common import scenario_logger

from .config_loader import UiSettings
from .exceptions import SessionClosedError, SessionProvisioningError, SessionTeardownError


class BrowserSession:
    """
    A live browser owned by exactly one scenario.

    Holds the Playwright driver, browser, context and page together with a
    logger bound to the scenario. Page objects receive the session and
    reach the page through it; the handle is unusable once `close()` ran.
    """

    def __init__(
        self,
        settings: UiSettings,
        playwright: Playwright,
        browser: Browser,
        context: BrowserContext,
        page: Page,
        log=None,
    ):
        self.settings = settings
        self.log = log or logger
        self._playwright = playwright
        self._browser = browser
        self._context = context
        self._page = page
        self._closed = False

    @property
    def page(self) -> Page:
        if self._closed:
            raise SessionClosedError("Browser session already closed")
        return self._page

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def implicit_wait_ms(self) -> int:
        return self.settings.implicit_wait_ms

    @property
    def current_url(self) -> str:
        return self.page.url

    def title(self) -> str:
        return self.page.title()

    def go_back(self) -> None:
        """Browser back button."""
        self.log.info("Navigating back")
        self.page.go_back(wait_until="load")

    def go_forward(self) -> None:
        """Browser forward button."""
        self.log.info("Navigating forward")
        self.page.go_forward(wait_until="load")

    def close(self) -> None:
        """
        Release context, browser and driver, in that order.

        Every step runs even if an earlier one failed. Failures are logged
        and swallowed. Calling close() twice is harmless.
        """
        if self._closed:
            return
        self._closed = True

        self.log.info("Closing browser session...")
        _release(
            self.log,
            context=self._context,
            browser=self._browser,
            playwright=self._playwright,
        )
        self._context = self._browser = self._playwright = None
        self.log.info("Browser session closed")


class BrowserManager:
    """
    Builds browser sessions from UI settings.

    Usage:
        manager = BrowserManager(UiSettings.from_config())
        with manager.session("test_home_page_loads") as session:
            HomePage(session).navigate_to_home_page()
    """

    # Launch args applied to every chromium launch
    CHROMIUM_ARGS = [
        "--ignore-certificate-errors",
        "--disable-features=IsolateOrigins,site-per-process",
    ]

    def __init__(self, settings: Optional[UiSettings] = None):
        self.settings = settings or UiSettings.from_config()

    def _launch_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "headless": self.settings.headless,
            "slow_mo": self.settings.slow_mo_ms,
        }
        if self.settings.browser == "chromium":
            args = list(self.CHROMIUM_ARGS)
            if not self.settings.headless:
                args.append("--start-maximized")
            options["args"] = args
        return options

    def _context_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"ignore_https_errors": True}
        if not self.settings.headless and self.settings.browser == "chromium":
            # Let the maximized window decide the viewport
            options["no_viewport"] = True
        else:
            options["viewport"] = {
                "width": self.settings.window_width,
                "height": self.settings.window_height,
            }
        return options

    def open_session(self, scenario: str = "scenario") -> BrowserSession:
        """
        Start a browser and return a session for one scenario.

        Raises:
            SessionProvisioningError: The driver, browser, context or page
                could not be created. Anything already started is released.
        """
        log = scenario_logger(scenario)
        log.info(
            f"Setting up {self.settings.browser} session "
            f"(headless={self.settings.headless})..."
        )

        playwright = browser = context = None
        try:
            playwright = sync_playwright().start()
            launcher = getattr(playwright, self.settings.browser)
            browser = launcher.launch(**self._launch_options())
            context = browser.new_context(**self._context_options())
            context.set_default_timeout(self.settings.implicit_wait_ms)
            context.set_default_navigation_timeout(self.settings.page_load_timeout_ms)
            page = context.new_page()
        except Exception as e:
            log.error(f"Browser session setup failed: {e}")
            _release(log, context=context, browser=browser, playwright=playwright)
            raise SessionProvisioningError(self.settings.browser, str(e)) from e

        log.info("Browser session setup complete")
        return BrowserSession(self.settings, playwright, browser, context, page, log=log)

    @contextmanager
    def session(self, scenario: str = "scenario") -> Iterator[BrowserSession]:
        """Scoped session: always closed on exit, whatever the scenario did."""
        browser_session = self.open_session(scenario)
        try:
            yield browser_session
        finally:
            browser_session.close()


def _release(log, context=None, browser=None, playwright=None) -> None:
    """Close whatever exists, logging (not raising) each failure."""
    steps = (
        ("context", context, "close"),
        ("browser", browser, "close"),
        ("playwright", playwright, "stop"),
    )
    for label, resource, method in steps:
        if resource is None:
            continue
        try:
            getattr(resource, method)()
        except Exception as e:
            error = SessionTeardownError(f"Failed to {method} {label}: {e}")
            log.opt(exception=e).error(str(error))


__all__ = [
    "BrowserManager",
    "BrowserSession",
]
