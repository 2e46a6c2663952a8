"""
Repository-level pytest configuration.

Sets environment defaults for local runs when the user/CI has not provided
them. Every key maps onto config/config.yaml (UI_BASE_URL -> ui.base_url),
so these only pin values that should not silently drift between machines.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _env_defaults() -> Generator[None, None, None]:
    """Fill in environment defaults without overriding explicit settings."""
    defaults = {
        "CONFIG_PATH": str(Path(__file__).parent / "config" / "config.yaml"),
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
