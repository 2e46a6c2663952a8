"""
================================================================================
Suite Tools
================================================================================

Utilities around the test suite rather than inside it.

Modules:
    - common: Run-scoped loguru logging
    - report_tools: JUnit/Allure result parsing, report rendering,
      static test discovery

Example:
    from suite_tools.report_tools import parse_junit_xml, render_report

    summary = parse_junit_xml("reports/junit.xml")
    print(render_report(summary, "summary"))

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
