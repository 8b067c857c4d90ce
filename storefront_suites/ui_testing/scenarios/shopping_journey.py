"""
================================================================================
Shopping Journey Scenario
================================================================================

One linear user journey across the storefront:

    register -> verify account -> log out -> log in -> browse Men/Tops/Jackets
    -> open a product -> rejected add-to-cart -> accepted add-to-cart

Each stage is an Allure step ending in one or more checkpoints. A failed
checkpoint raises CheckpointError and the remaining stages never run.

================================================================================
"""

from __future__ import annotations

import re
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page

from storefront_suites.ui_testing.data.storefront_data import StorefrontData
from storefront_suites.ui_testing.framework.checkpoint import CheckpointRecorder
from storefront_suites.ui_testing.framework.config_loader import ConfigLoader, get_config
from storefront_suites.ui_testing.framework.element_actions import ElementActions
from storefront_suites.ui_testing.framework.locator_registry import LocatorRegistry
from storefront_suites.ui_testing.framework.wait_helpers import WaitConfig, wait_until
from storefront_suites.ui_testing.pages.header_panel import HeaderPanel
from storefront_suites.ui_testing.pages.login_page import LoginPage
from storefront_suites.ui_testing.pages.product_page import ProductPage
from storefront_suites.ui_testing.pages.register_page import RegisterPage


class ShoppingJourney:
    """
    Register -> login -> browse -> add-to-cart journey.

    Usage:
        journey = ShoppingJourney(page, build_storefront_data())
        await journey.run()
        logger.info(journey.checks.summary())
    """

    def __init__(
        self,
        page: Page,
        data: StorefrontData,
        base_url: str = "",
        config: Optional[ConfigLoader] = None,
    ):
        config = config or get_config()
        self.page = page
        self.data = data
        self.timeouts = config.timeouts
        self.cart_badge_wait = WaitConfig(timeout_ms=self.timeouts.cart_badge, interval_ms=250)

        self.register_page = RegisterPage(page, base_url, config)
        self.login_page = LoginPage(page, base_url, config)
        self.header = HeaderPanel(page, config)
        self.product_page = ProductPage(page, base_url, config)

        self.navigation = ElementActions(page, LocatorRegistry())
        self.checks = CheckpointRecorder()
        self.account_url = re.compile(data.account_url_pattern)

    async def run(self) -> CheckpointRecorder:
        """Execute every stage in order; the first failed checkpoint aborts the run."""
        logger.info("Starting shopping journey")
        await self.register_account()
        await self.verify_registered_account()
        await self.log_out()
        await self.log_in()
        await self.browse_jackets()
        await self.open_product()
        await self.reject_incomplete_add_to_cart()
        await self.add_selected_product_to_cart()
        logger.info(f"Shopping journey finished: {self.checks.summary()}")
        return self.checks

    # =========================================================================
    # Stages
    # =========================================================================

    @allure.step("Register a new account")
    async def register_account(self) -> None:
        customer = self.data.registration["valid"]
        await self.register_page.open()
        await self.register_page.accept_consent()
        await self.register_page.register(
            customer.first_name,
            customer.last_name,
            customer.email,
            customer.password,
            customer.confirm_password,
        )

    @allure.step("Verify the new account")
    async def verify_registered_account(self) -> None:
        customer = self.data.registration["valid"]
        await self._expect_account_page("registration lands on account page")

        contact_info = await self.register_page.get_contact_info()
        self.checks.contains("contact block shows full name", contact_info, customer.full_name)
        self.checks.contains("contact block shows email", contact_info, customer.email)

    @allure.step("Log out")
    async def log_out(self) -> None:
        await self.header.logout()

    @allure.step("Log in with the known account")
    async def log_in(self) -> None:
        credentials = self.data.login["valid"]
        await self.login_page.open()
        await self.login_page.login(credentials.email, credentials.password)
        await self._expect_account_page("login lands on account page")

    @allure.step("Browse Men > Tops > Jackets")
    async def browse_jackets(self) -> None:
        expected_url = self.data.jackets.expected_url
        await self.product_page.navigate_to_men_jackets()
        await self.navigation.wait_for_url(expected_url, timeout=self.timeouts.navigation)
        self.checks.equal("jackets category URL", self.navigation.current_url, expected_url)

        products = await self.product_page.get_product_items()
        self.checks.greater_than("jackets listing size", len(products), 0)
        self.checks.is_true(
            "first product tile visible",
            await self.product_page.is_visible("product_items"),
        )

    @allure.step("Open the first product")
    async def open_product(self, index: int = 0) -> None:
        self.checks.is_true("product tile clicked", await self.product_page.click_product(index))
        for element in ("add_to_cart_button", "size_options", "color_options"):
            self.checks.is_true(
                f"{element} visible",
                await self.product_page.is_visible(element, timeout=self.timeouts.product_detail),
            )

    @allure.step("Add to cart without size and color")
    async def reject_incomplete_add_to_cart(self) -> None:
        await self.product_page.add_to_cart()
        self.checks.is_false(
            "incomplete selection is not added",
            await self.product_page.is_product_added_to_cart(),
        )

    @allure.step("Add to cart with size, color and quantity")
    async def add_selected_product_to_cart(self) -> None:
        jackets = self.data.jackets
        initial_count = await self.product_page.get_cart_count()
        logger.info(f"Cart count before adding: {initial_count}")

        await self.product_page.add_product_to_cart(
            jackets.default_size,
            jackets.default_color_index,
            jackets.default_quantity,
        )
        self.checks.is_true(
            "complete selection is added",
            await self.product_page.is_product_added_to_cart(),
        )
        self.checks.contains(
            "success message",
            await self.product_page.get_success_message(),
            self.data.cart.success_message,
        )

        expected_count = initial_count + jackets.default_quantity

        async def badge_updated() -> bool:
            return await self.product_page.get_cart_count() == expected_count

        # The mini-cart badge refreshes after the success message renders
        await wait_until(badge_updated, description="cart badge update", config=self.cart_badge_wait)
        self.checks.equal("cart count", await self.product_page.get_cart_count(), expected_count)

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _expect_account_page(self, name: str) -> None:
        await self.navigation.wait_for_url(self.account_url, timeout=self.timeouts.navigation)
        self.checks.regex_match(name, self.navigation.current_url, self.account_url)
