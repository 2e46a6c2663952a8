"""
================================================================================
Test Results
================================================================================

Reads the JUnit XML written by the last `run_tests.py` run and renders it
as a text summary, JSON or a small HTML page.

================================================================================
"""

import html
import json
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union

from loguru import logger


REPORT_FORMATS = ("summary", "json", "html")


class ResultsNotFoundError(FileNotFoundError):
    """No results file exists yet (tests were never run)."""
    pass


class ResultsParseError(ValueError):
    """The results file exists but is not valid JUnit XML."""
    pass


@dataclass
class TestResultSummary:
    """Summary of test execution results."""

    __test__ = False  # not a pytest test class

    total: int = 0
    passed: int = 0
    failures: int = 0
    errors: int = 0
    skipped: int = 0
    time_seconds: float = 0.0
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def pass_rate(self) -> float:
        """Passed / total as a percentage, 0 when nothing ran."""
        if self.total == 0:
            return 0.0
        return (self.passed / self.total) * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_tests": self.total,
            "passed": self.passed,
            "failures": self.failures,
            "errors": self.errors,
            "skipped": self.skipped,
            "time_seconds": round(self.time_seconds, 3),
            "pass_rate": round(self.pass_rate, 2),
            "timestamp": self.timestamp,
        }


def parse_junit_xml(path: Union[str, Path]) -> TestResultSummary:
    """
    Summarise a JUnit XML file as written by `pytest --junitxml`.

    Accepts both a `<testsuites>` root and a bare `<testsuite>` root.

    Raises:
        ResultsNotFoundError: File does not exist
        ResultsParseError: File is not parseable XML
    """
    path = Path(path)
    if not path.exists():
        raise ResultsNotFoundError(f"No test results found at {path}. Run tests first.")

    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ResultsParseError(f"Failed to parse results {path}: {e}") from e

    suites = [root] if root.tag == "testsuite" else root.findall("testsuite")

    summary = TestResultSummary(
        timestamp=datetime.fromtimestamp(path.stat().st_mtime).isoformat()
    )
    for suite in suites:
        summary.total += int(suite.get("tests", 0))
        summary.failures += int(suite.get("failures", 0))
        summary.errors += int(suite.get("errors", 0))
        summary.skipped += int(suite.get("skipped", 0))
        summary.time_seconds += float(suite.get("time", 0.0))

    summary.passed = max(
        summary.total - summary.failures - summary.errors - summary.skipped, 0
    )
    logger.debug(f"Parsed results from {path}: {summary.to_dict()}")
    return summary


def render_report(summary: TestResultSummary, output_format: str = "summary") -> str:
    """
    Render a summary in one of REPORT_FORMATS.

    Raises:
        ValueError: Unknown format
    """
    if output_format == "summary":
        return _render_summary(summary)
    if output_format == "json":
        return json.dumps(summary.to_dict(), indent=2)
    if output_format == "html":
        return _render_html(summary)
    raise ValueError(f"Unknown report format '{output_format}', expected one of {REPORT_FORMATS}")


def _render_summary(summary: TestResultSummary) -> str:
    lines = [
        "Test Execution Report",
        "=" * 21,
        f"Total Tests:    {summary.total}",
        f"Passed:         {summary.passed}",
        f"Failed:         {summary.failures}",
        f"Errors:         {summary.errors}",
        f"Skipped:        {summary.skipped}",
        f"Execution Time: {summary.time_seconds:.2f}s",
        f"Success Rate:   {summary.pass_rate:.2f}%",
    ]
    return "\n".join(lines)


def _render_html(summary: TestResultSummary) -> str:
    rows = [
        ("Total Tests", summary.total),
        ("Passed", summary.passed),
        ("Failed", summary.failures),
        ("Errors", summary.errors),
        ("Skipped", summary.skipped),
        ("Execution Time", f"{summary.time_seconds:.2f}s"),
        ("Success Rate", f"{summary.pass_rate:.2f}%"),
    ]
    body = "\n".join(
        f"      <tr><td>{html.escape(label)}</td><td>{html.escape(str(value))}</td></tr>"
        for label, value in rows
    )
    return (
        "<html>\n"
        "  <head><title>Test Report</title></head>\n"
        "  <body>\n"
        "    <h1>Prism UI Regression Suite Report</h1>\n"
        f"    <p>Generated from results at {html.escape(summary.timestamp)}</p>\n"
        "    <table border=\"1\">\n"
        f"{body}\n"
        "    </table>\n"
        "  </body>\n"
        "</html>\n"
    )


__all__ = [
    "REPORT_FORMATS",
    "ResultsNotFoundError",
    "ResultsParseError",
    "TestResultSummary",
    "parse_junit_xml",
    "render_report",
]
