"""
================================================================================
Suite Tools Common Utilities
================================================================================

Logging setup shared by the pytest plugin layer and `run_tests.py`.

The sinks are owned by a test run: `init_logger()` is called when the run
starts and `shutdown_logger()` when it ends. Code that logs on behalf of a
scenario receives a bound handle from `scenario_logger()` instead of
reaching for a module-level logger.

Exports:
    - init_logger: Install console (and optional file) sinks for a run
    - shutdown_logger: Remove the sinks installed by init_logger
    - scenario_logger: Logger bound to a scenario name
    - ensure_directory: mkdir -p helper

Usage:
    from suite_tools.common import init_logger, scenario_logger

    init_logger(level="DEBUG", log_file="reports/logs/ui_run.log")
    log = scenario_logger("test_home_page_loads")
    log.info("Starting scenario")

================================================================================
"""

import os
import sys
from typing import List, Optional

from loguru import logger


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[scenario]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level} | {extra[scenario]} | "
    "{name}:{function}:{line} | {message}"
)

# Records logged outside a scenario still need the extra field.
RUN_SCOPE = "-"

_handler_ids: List[int] = []


def init_logger(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> List[int]:
    """
    Install the run's loguru sinks.

    Removes loguru's default handler, adds a console sink and, when
    `log_file` is given, a rotating file sink. Calling it again while a
    run is active is a no-op.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format_string: Console format. Uses DEFAULT_FORMAT if not provided.
        log_file: Optional file path to write logs to.
        rotation: loguru rotation policy for the file sink.
        retention: loguru retention policy for the file sink.

    Returns:
        The handler ids that were installed.
    """
    if _handler_ids:
        return list(_handler_ids)

    logger.remove()
    logger.configure(extra={"scenario": RUN_SCOPE})

    _handler_ids.append(
        logger.add(
            sys.stderr,
            format=format_string or DEFAULT_FORMAT,
            level=level.upper(),
            colorize=True,
        )
    )

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            ensure_directory(log_dir)

        _handler_ids.append(
            logger.add(
                log_file,
                format=FILE_FORMAT,
                level=level.upper(),
                rotation=rotation,
                retention=retention,
            )
        )

    logger.debug(f"Logger initialized (level={level}, file={log_file})")
    return list(_handler_ids)


def shutdown_logger() -> None:
    """Remove the sinks installed by `init_logger`."""
    while _handler_ids:
        handler_id = _handler_ids.pop()
        try:
            logger.remove(handler_id)
        except ValueError:
            # Already removed by someone else calling logger.remove()
            pass


def scenario_logger(scenario: str):
    """Return a logger whose records carry the scenario name."""
    return logger.bind(scenario=scenario)


def ensure_directory(path: str) -> str:
    """
    Ensures a directory exists, creating it if necessary.

    Args:
        path: Directory path

    Returns:
        The path (for chaining)
    """
    os.makedirs(path, exist_ok=True)
    return path


__all__ = [
    "init_logger",
    "shutdown_logger",
    "scenario_logger",
    "ensure_directory",
    "RUN_SCOPE",
]
