"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers the project markers, tags collected tests by directory and keeps
tests that drive the public storefront behind an explicit opt-in.

Live tests run only with ``--run-live`` or ``LIVE_ENABLED=true``.

================================================================================
"""

import pytest

from storefront_suites.ui_testing.framework.config_loader import get_config


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - core purchase path"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - validation and edge cases"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )
    config.addinivalue_line(
        "markers", "live: Drives the real storefront over the network"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )
    config.addinivalue_line(
        "markers", "unit: Browser-free framework and page object tests"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to registration and sign-in"
    )
    config.addinivalue_line(
        "markers", "cart: Tests related to the shopping cart"
    )


def _live_enabled(config) -> bool:
    if config.getoption("--run-live"):
        return True
    return get_config().live_enabled


def pytest_collection_modifyitems(config, items):
    """
    Tag tests by directory and skip live tests unless explicitly enabled.
    """
    run_live = _live_enabled(config)
    skip_live = pytest.mark.skip(reason="live storefront tests need --run-live or LIVE_ENABLED=true")

    for item in items:
        # Auto-add 'ui' marker to tests in ui_testing directory
        if "ui_testing" in str(item.fspath):
            item.add_marker(pytest.mark.ui)

        # Auto-add 'unit' marker to tests in unit directory
        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)

        if "live" in item.keywords and not run_live:
            item.add_marker(skip_live)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    base_url = get_config().storefront.base_url
    return [
        "",
        "=" * 60,
        "Storefront E2E Suite",
        f"Storefront: {base_url}",
        f"Live tests: {'enabled' if _live_enabled(config) else 'skipped'}",
        "=" * 60,
        "",
    ]
