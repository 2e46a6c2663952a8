"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration with environment variable overrides.

Features:
    - Single YAML file (config/config.yaml)
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access with defaults
    - Typed UI settings snapshot for the browser harness

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from .exceptions import ConfigurationError


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url", "https://prismsoftwaresolutions.com")
        'https://prismsoftwaresolutions.com'

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - ui.headless -> UI_HEADLESS
        - logging.level -> LOGGING_LEVEL
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses CONFIG_PATH env var, then DEFAULT_CONFIG_PATH.
        """
        if getattr(self, "_initialized", False):
            return

        env_path = os.environ.get("CONFIG_PATH")
        self._config_path = Path(config_path or env_path or DEFAULT_CONFIG_PATH)
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e
        logger.debug(f"Loaded configuration from: {self._config_path}")

    @property
    def config_path(self) -> Path:
        return self._config_path

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Return an entire configuration section, or an empty dict."""
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in TRUE_VALUES
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None
        cls._config = {}


@dataclass(frozen=True)
class UiSettings:
    """Immutable snapshot of the `ui` section used by the browser harness."""

    base_url: str = "https://prismsoftwaresolutions.com"
    browser: str = "chromium"
    headless: bool = True
    implicit_wait_ms: int = 10000
    page_load_timeout_ms: int = 30000
    window_width: int = 1920
    window_height: int = 1080
    navigation_attempts: int = 1
    slow_mo_ms: int = 0

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "UiSettings":
        """
        Build settings from the loader, falling back to field defaults.

        Raises:
            ConfigurationError: A value is missing its expected type
                (e.g. UI_IMPLICIT_WAIT_MS=10s, headless: "maybe") or out of range.
        """
        config = config or ConfigLoader()
        defaults = cls()

        def _int(key: str, default: int) -> int:
            value = config.get(key, default)
            try:
                return int(value)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    f"Invalid ui setting {key}={value!r}: expected an integer"
                ) from e

        def _flag(key: str, default: bool) -> bool:
            value = config.get(key, default)
            if isinstance(value, bool):
                return value
            text = str(value).strip().lower()
            if text in TRUE_VALUES:
                return True
            if text in FALSE_VALUES:
                return False
            raise ConfigurationError(f"Invalid ui setting {key}={value!r}: expected true or false")

        browser = str(config.get("ui.browser", defaults.browser)).lower()
        if browser not in SUPPORTED_BROWSERS:
            raise ConfigurationError(
                f"Unsupported browser '{browser}', expected one of {SUPPORTED_BROWSERS}"
            )

        attempts = _int("ui.navigation_attempts", defaults.navigation_attempts)
        if attempts < 1:
            raise ConfigurationError("ui.navigation_attempts must be at least 1")

        return cls(
            base_url=str(config.get("ui.base_url", defaults.base_url)).rstrip("/"),
            browser=browser,
            headless=_flag("ui.headless", defaults.headless),
            implicit_wait_ms=_int("ui.implicit_wait_ms", defaults.implicit_wait_ms),
            page_load_timeout_ms=_int("ui.page_load_timeout_ms", defaults.page_load_timeout_ms),
            window_width=_int("ui.window_width", defaults.window_width),
            window_height=_int("ui.window_height", defaults.window_height),
            navigation_attempts=attempts,
            slow_mo_ms=_int("ui.slow_mo_ms", defaults.slow_mo_ms),
        )

    def url_for(self, path: str) -> str:
        """Absolute URL for a site route ("" for home, "/about", ...)."""
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UiSettings",
    "SUPPORTED_BROWSERS",
]
