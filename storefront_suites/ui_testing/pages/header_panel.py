"""
================================================================================
Header Panel Page Object (Async / Playwright)
================================================================================

Customer menu in the storefront header: signed-in state and logout.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page

from storefront_suites.ui_testing.framework.config_loader import ConfigLoader, get_config
from storefront_suites.ui_testing.framework.element_actions import ElementActions
from storefront_suites.ui_testing.framework.locator_registry import LocatorRegistry, SelectorRef


class HeaderPanel:
    """Header customer menu (async)."""

    LOCATORS = LocatorRegistry(
        SelectorRef(
            "customer_menu_toggle",
            '.header.links button.action.switch[data-action="customer-menu-toggle"]',
        ),
        SelectorRef("logout_link", 'a[href*="/customer/account/logout/"]'),
    )

    def __init__(self, page: Page, config: Optional[ConfigLoader] = None):
        config = config or get_config()
        self.page = page
        self.actions = ElementActions(page, self.LOCATORS, config.timeouts.action)

    async def is_logged_in(self, timeout: int = 0) -> bool:
        """True when the customer menu toggle is showing."""
        return await self.actions.is_visible("customer_menu_toggle", timeout=timeout)

    @allure.step("Log out")
    async def logout(self) -> None:
        """Open the customer menu and follow its sign-out link."""
        logger.info("Logging out")
        await self.actions.locator("customer_menu_toggle").first.click(
            timeout=self.actions.default_timeout
        )
        await self.actions.locator("logout_link").first.click(
            timeout=self.actions.default_timeout
        )
