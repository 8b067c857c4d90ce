"""
================================================================================
Configuration Loader
================================================================================

Typed view over config/config.yaml with environment variable overrides.

Every section the suite reads (storefront, browser, timeouts, logging) is a
frozen dataclass whose field defaults are the only place a fallback value
lives. Page objects and scenarios read ``config.timeouts.cart_badge`` rather
than repeating a key and a default at each call site.

Features:
    - Environment variable override (STOREFRONT_BASE_URL overrides storefront.base_url)
    - Override strings converted to the type of the field default
    - Dot notation path access for keys outside the typed sections
    - One cached process-wide instance via get_config()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import yaml
from loguru import logger


# Repository-level config/config.yaml
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "config.yaml"

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")

S = TypeVar("S")


class ConfigurationError(Exception):
    """Raised when configuration loading or conversion fails."""
    pass


# ================================================================================
# Sections
# ================================================================================

@dataclass(frozen=True)
class StorefrontSettings:
    base_url: str = "https://magento.softwaretestingboard.com"


@dataclass(frozen=True)
class BrowserSettings:
    type: str = "chromium"
    headless: bool = True
    slow_mo: int = 0
    viewport_width: int = 1920
    viewport_height: int = 1080


@dataclass(frozen=True)
class Timeouts:
    """Per-call-site bounds in milliseconds."""
    action: int = 10000
    navigation: int = 30000
    errors_login: int = 2000
    errors_register: int = 1000
    contact_info: int = 10000
    listing: int = 10000
    product_detail: int = 5000
    cart_success: int = 5000
    cart_count: int = 1000
    cart_badge: int = 5000


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"
    file: str = ""
    rotation: str = "10 MB"
    retention: str = "7 days"


# ================================================================================
# Loader
# ================================================================================

class ConfigLoader:
    """
    Configuration loaded once from YAML, overridable from the environment.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (STOREFRONT_BASE_URL)
        2. YAML configuration file
        3. Section field defaults

    Usage:
        >>> config = get_config()
        >>> config.storefront.base_url
        'https://magento.softwaretestingboard.com'
        >>> config.timeouts.cart_success
        5000

    Environment Variable Mapping:
        - storefront.base_url -> STOREFRONT_BASE_URL
        - browser.headless -> BROWSER_HEADLESS
        - timeouts.action -> TIMEOUTS_ACTION
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        data: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Args:
            config_path: YAML file to read. Uses DEFAULT_CONFIG_PATH if not specified.
            data: Already-parsed configuration; skips reading any file.
            environ: Override source. Defaults to ``os.environ``.
        """
        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Dict[str, Any] = dict(data) if data is not None else self._load_file()
        self._environ = os.environ if environ is None else environ

        self.storefront = self._section("storefront", StorefrontSettings)
        self.browser = self._section("browser", BrowserSettings)
        self.timeouts = self._section("timeouts", Timeouts)
        self.logging = self._section("logging", LoggingSettings)
        self.live_enabled: bool = self.get("live.enabled", False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], environ: Optional[Mapping[str, str]] = None) -> "ConfigLoader":
        """Build from nested mappings; environment overrides apply only when ``environ`` is given."""
        return cls(data=data, environ=environ or {})

    def _load_file(self) -> Dict[str, Any]:
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            return {}

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Configuration root must be a mapping: {self._config_path}")
        logger.debug(f"Loaded configuration from: {self._config_path}")
        return loaded

    def _section(self, name: str, settings_cls: Type[S]) -> S:
        values = {
            field.name: self.get(f"{name}.{field.name}", field.default)
            for field in fields(settings_cls)
        }
        return settings_cls(**values)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "live.enabled")
            default: Value when the key is absent; also the type reference
                for converting an environment override

        Raises:
            ConfigurationError: When an override cannot be converted
        """
        env_key = key.upper().replace(".", "_")
        env_value = self._environ.get(env_key)
        if env_value is not None:
            return _convert_type(env_key, env_value, default)

        value: Any = self._config
        for part in key.split("."):
            value = value.get(part) if isinstance(value, dict) else None
            if value is None:
                return default
        return value


def _convert_type(env_key: str, value: str, reference: Any) -> Any:
    """Convert an environment string to the type of ``reference``."""
    if reference is None or isinstance(reference, str):
        return value

    if isinstance(reference, bool):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"{env_key}={value!r} is not a boolean")

    try:
        return type(reference)(value)
    except ValueError as e:
        raise ConfigurationError(
            f"{env_key}={value!r} is not a valid {type(reference).__name__}"
        ) from e


@lru_cache(maxsize=None)
def get_config() -> ConfigLoader:
    """
    Process-wide configuration, loaded on first use.

    ``get_config.cache_clear()`` forces the next call to re-read the file
    and the environment.
    """
    return ConfigLoader()


__all__ = [
    "BrowserSettings",
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
    "LoggingSettings",
    "StorefrontSettings",
    "Timeouts",
    "get_config",
]
