"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for live UI tests, providing fixtures for
browser management, page objects, and test setup/teardown.

Key Features:
- Browser and page lifecycle management (one browser per test)
- Page Object fixtures for all storefront pages
- Run-scoped test data with unique registration emails
- Screenshot capture on failure

================================================================================
"""

from typing import AsyncGenerator

import allure
import pytest
from loguru import logger
from playwright.async_api import Page

from storefront_suites.ui_testing.data.storefront_data import StorefrontData, build_storefront_data
from storefront_suites.ui_testing.framework.browser_manager import BrowserManager
from storefront_suites.ui_testing.framework.config_loader import ConfigLoader, get_config
from storefront_suites.ui_testing.pages.header_panel import HeaderPanel
from storefront_suites.ui_testing.pages.login_page import LoginPage
from storefront_suites.ui_testing.pages.product_page import ProductPage
from storefront_suites.ui_testing.pages.register_page import RegisterPage


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def storefront_config() -> ConfigLoader:
    return get_config()


@pytest.fixture(scope="session")
def base_url(storefront_config: ConfigLoader) -> str:
    return storefront_config.storefront.base_url


@pytest.fixture(scope="session")
def storefront_data(base_url: str) -> StorefrontData:
    """
    Run-scoped test data.

    Built once so every scenario in the run shares the same unique email.
    """
    data = build_storefront_data(base_url=base_url)
    logger.info(f"Registration email for this run: {data.registration['valid'].email}")
    return data


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager(storefront_config: ConfigLoader) -> AsyncGenerator[BrowserManager, None]:
    """
    Function-scoped browser manager fixture.

    Each test gets its own browser, so cookies and the cart never leak
    between scenarios.
    """
    manager = BrowserManager(config=storefront_config)
    await manager.start()
    yield manager
    await manager.close()


@pytest.fixture
async def page(browser_manager: BrowserManager) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture in a fresh isolated context.
    """
    page = await browser_manager.new_page()
    yield page
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page, base_url: str) -> LoginPage:
    return LoginPage(page, base_url)


@pytest.fixture
def register_page(page: Page, base_url: str) -> RegisterPage:
    return RegisterPage(page, base_url)


@pytest.fixture
def product_page(page: Page, base_url: str) -> ProductPage:
    return ProductPage(page, base_url)


@pytest.fixture
def header(page: Page) -> HeaderPanel:
    return HeaderPanel(page)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Remember each phase's report on the item for the teardown fixture below."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(autouse=True)
async def screenshot_on_failure(request, page: Page) -> AsyncGenerator[None, None]:
    """
    Attach the current URL and a full-page screenshot when a UI test fails.

    Depends on the page fixture so it is torn down before the page closes.
    """
    yield
    report = getattr(request.node, "rep_call", None)
    if report is None or not report.failed:
        return

    allure.attach(page.url, name="failure_url", attachment_type=allure.attachment_type.URI_LIST)
    try:
        screenshot = await page.screenshot(full_page=True)
    except Exception as e:
        logger.warning(f"Failed to capture screenshot on failure: {e}")
        return
    allure.attach(
        screenshot,
        name="failure_screenshot",
        attachment_type=allure.attachment_type.PNG,
    )
