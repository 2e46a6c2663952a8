"""
================================================================================
Report Tools
================================================================================

Result parsing, report rendering and test discovery for `run_tests.py`,
plus the Allure attachment helpers used by the UI hooks.

================================================================================
"""

from .catalog import count_tests, list_tests
from .results import (
    REPORT_FORMATS,
    ResultsNotFoundError,
    ResultsParseError,
    TestResultSummary,
    parse_junit_xml,
    render_report,
)

__all__ = [
    "count_tests",
    "list_tests",
    "REPORT_FORMATS",
    "ResultsNotFoundError",
    "ResultsParseError",
    "TestResultSummary",
    "parse_junit_xml",
    "render_report",
]
