import dataclasses

import pytest

from prismsuite.ui_testing.framework import browser_manager as bm
from prismsuite.ui_testing.framework.browser_manager import BrowserManager
from prismsuite.ui_testing.framework.exceptions import (
    SessionClosedError,
    SessionProvisioningError,
)
from prismsuite.unit.fakes import Closeable, FakePage


class FakeContext(Closeable):
    def __init__(self, log, options, fail_new_page=False):
        super().__init__("context", log)
        self.options = options
        self.fail_new_page = fail_new_page
        self.default_timeout = None
        self.navigation_timeout = None

    def set_default_timeout(self, timeout):
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout):
        self.navigation_timeout = timeout

    def new_page(self):
        if self.fail_new_page:
            raise RuntimeError("page crashed")
        return FakePage()


class FakeBrowser(Closeable):
    def __init__(self, driver, options):
        super().__init__("browser", driver.log, fail=driver.fail_browser_close)
        self.driver = driver
        self.options = options

    def new_context(self, **options):
        self.driver.context = FakeContext(self.log, options, self.driver.fail_new_page)
        return self.driver.context


class FakeLauncher:
    def __init__(self, driver):
        self.driver = driver

    def launch(self, **options):
        if self.driver.fail_launch:
            raise RuntimeError("Executable doesn't exist")
        self.driver.browser = FakeBrowser(self.driver, options)
        return self.driver.browser


class FakeDriver(Closeable):
    """What `sync_playwright().start()` returns."""

    def __init__(self):
        super().__init__("playwright", [])
        self.fail_launch = False
        self.fail_new_page = False
        self.fail_browser_close = False
        self.browser = None
        self.context = None
        self.chromium = FakeLauncher(self)
        self.firefox = FakeLauncher(self)


@pytest.fixture
def driver(monkeypatch):
    fake = FakeDriver()

    class _Starter:
        def start(self):
            return fake

    monkeypatch.setattr(bm, "sync_playwright", lambda: _Starter())
    return fake


@pytest.fixture
def manager(settings):
    return BrowserManager(settings)


def test_session_is_configured_with_implicit_wait(manager, driver, settings):
    with manager.session("test_open") as session:
        assert isinstance(session.page, FakePage)
        assert driver.context.default_timeout == settings.implicit_wait_ms
        assert driver.context.navigation_timeout == settings.page_load_timeout_ms


def test_teardown_runs_after_normal_exit(manager, driver):
    with manager.session("test_ok") as session:
        pass

    assert session.closed
    assert driver.log == ["context.close", "browser.close", "playwright.stop"]


def test_teardown_runs_when_scenario_raises(manager, driver):
    with pytest.raises(AssertionError, match="heading mismatch"):
        with manager.session("test_fails"):
            raise AssertionError("heading mismatch")

    assert driver.log == ["context.close", "browser.close", "playwright.stop"]


def test_teardown_failure_does_not_mask_scenario_result(manager, driver):
    driver.fail_browser_close = True

    with pytest.raises(AssertionError, match="original"):
        with manager.session("test_fails"):
            raise AssertionError("original")

    # Later steps still ran after the browser failed to close
    assert driver.log == ["context.close", "browser.close", "playwright.stop"]


def test_teardown_failure_is_swallowed_on_success(manager, driver):
    driver.fail_browser_close = True

    with manager.session("test_ok"):
        pass

    assert driver.log[-1] == "playwright.stop"


def test_launch_failure_raises_provisioning_error(manager, driver):
    driver.fail_launch = True

    with pytest.raises(SessionProvisioningError, match="chromium") as exc_info:
        manager.open_session("test_no_browser")

    assert "Executable doesn't exist" in exc_info.value.reason
    assert driver.log == ["playwright.stop"]


def test_partial_setup_is_released(manager, driver):
    driver.fail_new_page = True

    with pytest.raises(SessionProvisioningError):
        manager.open_session("test_no_page")

    assert driver.log == ["context.close", "browser.close", "playwright.stop"]


def test_page_unusable_after_close(manager, driver):
    session = manager.open_session("test_closed")
    session.close()
    session.close()

    with pytest.raises(SessionClosedError):
        session.page
    assert driver.log.count("context.close") == 1


def test_headless_uses_fixed_viewport(settings, driver):
    BrowserManager(settings).open_session()

    assert driver.browser.options["headless"] is True
    assert "--start-maximized" not in driver.browser.options["args"]
    assert driver.context.options["viewport"] == {
        "width": settings.window_width,
        "height": settings.window_height,
    }


def test_headed_chromium_starts_maximized(settings, driver):
    headed = dataclasses.replace(settings, headless=False)

    BrowserManager(headed).open_session()

    assert "--start-maximized" in driver.browser.options["args"]
    assert driver.context.options["no_viewport"] is True
    assert "viewport" not in driver.context.options


def test_non_chromium_gets_no_chromium_args(settings, driver):
    firefox = dataclasses.replace(settings, browser="firefox", headless=False)

    BrowserManager(firefox).open_session()

    assert "args" not in driver.browser.options
    assert "viewport" in driver.context.options


def test_back_and_forward_follow_history(session, fake_page):
    fake_page.goto("https://prismsoftwaresolutions.com")
    fake_page.goto("https://prismsoftwaresolutions.com/about")

    session.go_back()
    assert session.current_url == "https://prismsoftwaresolutions.com"

    session.go_forward()
    assert session.current_url == "https://prismsoftwaresolutions.com/about"
