from typing import List

import pytest

from prismsuite.ui_testing.framework.browser_manager import BrowserSession
from prismsuite.ui_testing.framework.config_loader import UiSettings
from prismsuite.unit.fakes import Closeable, FakePage
from suite_tools.common import scenario_logger


@pytest.fixture
def settings() -> UiSettings:
    return UiSettings(base_url="https://prismsoftwaresolutions.com", implicit_wait_ms=500)


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def closed_log() -> List[str]:
    """Order in which session resources were released."""
    return []


@pytest.fixture
def session(settings, fake_page, closed_log) -> BrowserSession:
    return BrowserSession(
        settings,
        playwright=Closeable("playwright", closed_log),
        browser=Closeable("browser", closed_log),
        context=Closeable("context", closed_log),
        page=fake_page,
        log=scenario_logger("unit"),
    )
