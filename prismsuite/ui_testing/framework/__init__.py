"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based (sync API) UI automation framework.

Components:
    - browser_manager: Per-scenario browser session lifecycle
    - locators: Static locator tables and explicit resolution
    - element_actions: Shared click/type/read/scroll/navigate functions
    - config_loader: YAML + env configuration, typed UI settings
    - exceptions: Infrastructure / resolution / navigation errors

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager, BrowserSession
from .config_loader import ConfigLoader, UiSettings
from .exceptions import (
    ElementNotFoundError,
    ElementNotInteractableError,
    NavigationError,
    SessionProvisioningError,
)
from .locators import By, Locator, LocatorTable

__all__ = [
    "BrowserManager",
    "BrowserSession",
    "ConfigLoader",
    "UiSettings",
    "By",
    "Locator",
    "LocatorTable",
    "ElementNotFoundError",
    "ElementNotInteractableError",
    "NavigationError",
    "SessionProvisioningError",
]
