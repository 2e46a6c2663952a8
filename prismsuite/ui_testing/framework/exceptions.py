"""
================================================================================
Framework Exceptions
================================================================================

Error taxonomy for the UI framework.

    SuiteError
    ├── ConfigurationError
    ├── InfrastructureError
    │   ├── SessionProvisioningError
    │   ├── SessionTeardownError
    │   └── SessionClosedError
    ├── ElementResolutionError
    │   ├── ElementNotFoundError
    │   └── ElementNotInteractableError
    └── NavigationError

Infrastructure faults belong to the harness, resolution and navigation
faults abort the current scenario. Assertion failures are plain pytest
assertions and are not modelled here.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional


class SuiteError(Exception):
    """Base class for all framework errors."""
    pass


class ConfigurationError(SuiteError):
    """Raised when configuration loading or access fails."""
    pass


class InfrastructureError(SuiteError):
    """Browser session could not be provided or released."""
    pass


class SessionProvisioningError(InfrastructureError):
    """Raised when the browser session cannot be started."""

    def __init__(self, browser: str, reason: str):
        self.browser = browser
        self.reason = reason
        super().__init__(f"Failed to provision {browser} session: {reason}")


class SessionTeardownError(InfrastructureError):
    """Wraps a failure while closing a session. Logged, never raised to tests."""
    pass


class SessionClosedError(InfrastructureError):
    """Raised when a session handle is used after teardown."""
    pass


class ElementResolutionError(SuiteError):
    """Base for faults raised while resolving or acting on an element."""

    def __init__(self, name: str, selector: str, message: Optional[str] = None):
        self.name = name
        self.selector = selector
        super().__init__(message or f"{name} ({selector})")


class ElementNotFoundError(ElementResolutionError):
    """Locator matched nothing within the implicit wait window."""

    def __init__(self, name: str, selector: str, timeout_ms: int):
        self.timeout_ms = timeout_ms
        super().__init__(
            name,
            selector,
            f"Element '{name}' not found within {timeout_ms}ms: {selector}",
        )


class ElementNotInteractableError(ElementResolutionError):
    """Element exists but the action could not be performed on it."""

    def __init__(self, name: str, selector: str, action: str, reason: str):
        self.action = action
        super().__init__(
            name,
            selector,
            f"Cannot {action} element '{name}' ({selector}): {reason}",
        )


class NavigationError(SuiteError):
    """Page load failed or timed out."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"Navigation to {url} failed: {reason}")


__all__ = [
    "SuiteError",
    "ConfigurationError",
    "InfrastructureError",
    "SessionProvisioningError",
    "SessionTeardownError",
    "SessionClosedError",
    "ElementResolutionError",
    "ElementNotFoundError",
    "ElementNotInteractableError",
    "NavigationError",
]
