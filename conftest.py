"""
Repository-level pytest configuration.

Loads config/config.yaml once and configures Loguru before any suite runs.
Every value can be overridden from the environment, e.g.
STOREFRONT_BASE_URL=https://staging.example.test or BROWSER_HEADLESS=false.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from storefront_suites.ui_testing.framework.log_config import init_logger


def pytest_addoption(parser):
    """Register suite command line options."""
    parser.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="Run tests that drive the live storefront",
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> None:
    """Install the Loguru sinks once per session."""
    init_logger()
