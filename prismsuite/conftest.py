"""
================================================================================
Root Pytest Configuration
================================================================================

Project-wide markers, directory-based auto-marking, the report header and
the run-scoped logger: sinks are installed when pytest configures and
removed when it unconfigures.

================================================================================
"""

import pytest

from prismsuite.ui_testing.framework.config_loader import ConfigLoader
from suite_tools.common import init_logger, shutdown_logger


def pytest_configure(config):
    """Register markers and start the run's logger."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )
    config.addinivalue_line(
        "markers", "ui: Live browser tests against the target site"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests that run without a browser"
    )

    # Page markers
    config.addinivalue_line(
        "markers", "home: Tests for the home page"
    )
    config.addinivalue_line(
        "markers", "about: Tests for the about page"
    )
    config.addinivalue_line(
        "markers", "contact: Tests for the contact page"
    )
    config.addinivalue_line(
        "markers", "navigation: Cross-page navigation flows"
    )

    settings = ConfigLoader()
    init_logger(
        level=settings.get("logging.level", "INFO"),
        log_file=settings.get("logging.file"),
        rotation=settings.get("logging.rotation", "10 MB"),
        retention=settings.get("logging.retention", "7 days"),
    )


def pytest_unconfigure(config):
    shutdown_logger()


def pytest_collection_modifyitems(config, items):
    """Auto-add `ui` / `unit` markers based on the test's directory."""
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        if "unit" in path.replace("\\", "/").split("/"):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    return [
        "",
        "=" * 60,
        "Prism Software Solutions UI Regression Suite",
        "=" * 60,
        "",
    ]
