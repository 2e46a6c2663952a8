"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for live browser scenarios.

Key Features:
- One fresh browser session per test, closed whatever the outcome
- Page Object fixtures bound to that session
- Screenshot and URL attached to Allure on failure
- Shared contact form data

================================================================================
"""

from typing import Generator

import pytest
from loguru import logger

from prismsuite.ui_testing.framework.browser_manager import BrowserManager, BrowserSession
from prismsuite.ui_testing.framework.config_loader import ConfigLoader, UiSettings
from prismsuite.ui_testing.pages import AboutPage, ContactPage, HomePage
from suite_tools.report_tools.allure_utils import attach_png, attach_text


# ================================================================================
# Session Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings() -> UiSettings:
    """UI settings for the whole run, read once."""
    return UiSettings.from_config(ConfigLoader())


@pytest.fixture(scope="session")
def browser_manager(ui_settings: UiSettings) -> BrowserManager:
    return BrowserManager(ui_settings)


@pytest.fixture(scope="function")
def session(
    request: pytest.FixtureRequest,
    browser_manager: BrowserManager,
) -> Generator[BrowserSession, None, None]:
    """
    Function-scoped browser session.

    Provisioning failures surface as fixture errors, not test failures.
    Teardown runs after every test, passed or failed.
    """
    with browser_manager.session(request.node.name) as browser_session:
        browser_session.log.info(f"Starting: {request.node.name}")
        yield browser_session


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def home_page(session: BrowserSession) -> HomePage:
    return HomePage(session)


@pytest.fixture
def about_page(session: BrowserSession) -> AboutPage:
    return AboutPage(session)


@pytest.fixture
def contact_page(session: BrowserSession) -> ContactPage:
    return ContactPage(session)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Attach a screenshot and the current URL to Allure when a UI test fails.

    Runs before fixture teardown, so the session is still open.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed:
        return

    browser_session = getattr(item, "funcargs", {}).get("session")
    if browser_session is None or browser_session.closed:
        return

    try:
        attach_png(browser_session.page.screenshot(full_page=True), name="failure_screenshot")
        attach_text(browser_session.current_url, name="Current URL")
    except Exception as e:
        # Log but don't fail if capture fails
        logger.warning(f"Failed to capture failure details: {e}")


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def test_data():
    """
    Provides common test data for UI tests.
    """
    return {
        "contact": {
            "name": "John Doe",
            "email": "john.doe@example.com",
            "message": "I am interested in learning more about your services.",
        },
        "invalid_email": {
            "name": "Test User",
            "email": "invalid-email",
            "message": "Test message",
        },
    }
