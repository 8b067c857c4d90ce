"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the storefront suite.

Components:
    - locator_registry: Declarative, lazily resolved element locators
    - element_actions: Registry-aware actions and never-raising queries
    - wait_helpers: Bounded polling for asynchronous rendering
    - checkpoint: Scenario assertion boundary
    - browser_manager: Browser lifecycle management
    - config_loader / log_config: Configuration and Loguru setup

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .checkpoint import CheckpointError, CheckpointRecorder, CheckpointResult
from .config_loader import ConfigLoader, ConfigurationError, Timeouts, get_config
from .element_actions import ElementActions
from .locator_registry import LocatorRegistry, SelectorRef, UnknownElementError
from .log_config import init_logger
from .wait_helpers import WaitConfig, wait_until, wait_until_stable

__all__ = [
    "BrowserManager",
    "CheckpointError",
    "CheckpointRecorder",
    "CheckpointResult",
    "ConfigLoader",
    "ConfigurationError",
    "ElementActions",
    "LocatorRegistry",
    "SelectorRef",
    "Timeouts",
    "UnknownElementError",
    "WaitConfig",
    "get_config",
    "init_logger",
    "wait_until",
    "wait_until_stable",
]
