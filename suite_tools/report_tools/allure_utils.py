"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers used by the pytest hooks and Allure HTML generation
used by `run_tests.py`.

Features:
- Text and PNG attachment helpers
- Allure result summary (pass/fail/broken counts)
- HTML report generation with history carry-over

================================================================================
"""

import json
import shutil
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger

from .results import TestResultSummary


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_text(text: str, name: str = "Text"):
    """Attach plain text to the current Allure test."""
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_png(data: bytes, name: str = "Screenshot"):
    """Attach a PNG screenshot to the current Allure test."""
    allure.attach(
        data,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


# ================================================================================
# Report Processing
# ================================================================================

class AllureReportProcessor:
    """
    Summarises Allure results and generates the HTML report.
    """

    def __init__(
        self,
        results_dir: Path,
        report_dir: Optional[Path] = None,
    ):
        """
        Initialize processor.

        Args:
            results_dir: Allure results directory
            report_dir: Output report directory
        """
        self.results_dir = Path(results_dir)
        self.report_dir = Path(report_dir or self.results_dir.parent / "allure-report")

    def parse_results(self) -> List[Dict[str, Any]]:
        """Load every `*-result.json` file in the results directory."""
        results = []

        for result_file in self.results_dir.glob("*-result.json"):
            try:
                with open(result_file, encoding="utf-8") as f:
                    results.append(json.load(f))
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to parse {result_file}: {e}")

        return results

    def generate_summary(self) -> TestResultSummary:
        """
        Count results by Allure status.

        Allure's `broken` (unexpected exception, e.g. element not found or a
        fixture error) maps to `errors`; `failed` (assertion) to `failures`.
        """
        summary = TestResultSummary()

        for result in self.parse_results():
            summary.total += 1
            status = result.get("status", "unknown")
            if status == "passed":
                summary.passed += 1
            elif status == "failed":
                summary.failures += 1
            elif status == "broken":
                summary.errors += 1
            elif status == "skipped":
                summary.skipped += 1

            start = result.get("start", 0)
            stop = result.get("stop", 0)
            summary.time_seconds += (stop - start) / 1000

        return summary

    def copy_history(self) -> None:
        """Copy history from the previous report so trends survive regeneration."""
        history_source = self.report_dir / "history"
        history_dest = self.results_dir / "history"

        if history_source.exists():
            if history_dest.exists():
                shutil.rmtree(history_dest)
            shutil.copytree(history_source, history_dest)
            logger.info("Copied history from previous report")

    def generate_report(self) -> bool:
        """
        Generate the Allure HTML report.

        Returns:
            True if successful
        """
        self.copy_history()

        cmd = [
            "allure", "generate",
            str(self.results_dir),
            "-o", str(self.report_dir),
            "--clean"
        ]

        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            logger.warning("Allure CLI not found. Please install Allure to generate reports.")
            return False

        if result.returncode != 0:
            logger.error(f"Report generation failed: {result.stderr}")
            return False

        logger.info(f"Report generated at {self.report_dir}")
        return True


__all__ = [
    "attach_text",
    "attach_png",
    "AllureReportProcessor",
]
