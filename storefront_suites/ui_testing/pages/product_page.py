"""
================================================================================
Product Browsing & Cart Page Object (Async / Playwright)
================================================================================

Category navigation, product listing, product detail options and the
mini-cart badge.

Highlights:
  - Nested menu navigation issued strictly in hover -> hover -> click order
  - Index and size picks report whether they acted instead of raising
  - Cart success and cart count reads convert timeouts to False / 0

================================================================================
"""

from __future__ import annotations

import re
from typing import List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from storefront_suites.ui_testing.framework.config_loader import ConfigLoader, get_config
from storefront_suites.ui_testing.framework.element_actions import ElementActions
from storefront_suites.ui_testing.framework.locator_registry import LocatorRegistry, SelectorRef


_LEADING_INT = re.compile(r"^\s*(\d+)")


def parse_cart_count(text: Optional[str]) -> int:
    """
    Leading integer of a cart badge text; 0 when missing or unparseable.

    >>> parse_cart_count("3")
    3
    >>> parse_cart_count("")
    0
    """
    match = _LEADING_INT.match(text or "")
    return int(match.group(1)) if match else 0


class ProductPage:
    """Category listing, product detail and cart page object (async)."""

    LOCATORS = LocatorRegistry(
        # Navigation
        SelectorRef("men_menu", "#ui-id-5"),
        SelectorRef("men_tops_submenu", "#ui-id-17"),
        SelectorRef("men_jackets_submenu", "#ui-id-19"),
        # Listing
        SelectorRef("product_items", ".item.product.product-item"),
        # Product detail
        SelectorRef("size_options", ".swatch-option.text"),
        SelectorRef("color_options", ".swatch-option.color"),
        SelectorRef("quantity_input", "#qty"),
        SelectorRef("add_to_cart_button", "#product-addtocart-button"),
        # Cart
        SelectorRef("cart_counter", ".counter-number"),
        SelectorRef("success_message", '[data-ui-id="message-success"]'),
        SelectorRef("consent_button", '[class="fc-button-label"]'),
    )

    def __init__(self, page: Page, base_url: str = "", config: Optional[ConfigLoader] = None):
        config = config or get_config()
        self.page = page
        self.base_url = (base_url or config.storefront.base_url).rstrip("/")
        self.actions = ElementActions(page, self.LOCATORS, config.timeouts.action)
        self.listing_timeout = config.timeouts.listing
        self.cart_success_timeout = config.timeouts.cart_success
        self.cart_count_timeout = config.timeouts.cart_count

    async def accept_consent(self) -> bool:
        return await self.actions.click_if_visible("consent_button")

    # =========================================================================
    # Navigation & listing
    # =========================================================================

    @allure.step("Navigate to Men > Tops > Jackets")
    async def navigate_to_men_jackets(self) -> None:
        """
        Open the Men / Tops / Jackets category through the header menu.

        Each submenu only exists once its parent is hovered.
        """
        await self.actions.hover("men_menu")
        await self.actions.hover("men_tops_submenu")
        await self.actions.click("men_jackets_submenu")

    async def get_product_items(self) -> List[Locator]:
        """
        Wait for the first product tile, then snapshot the listing.

        Returns:
            Per-item locators as they are now; empty when no tile appeared.
            The list does not follow later DOM changes.
        """
        if not await self.actions.wait_visible("product_items", timeout=self.listing_timeout):
            logger.warning("No product tiles appeared")
            return []
        items = await self.actions.snapshot("product_items")
        logger.debug(f"Product listing has {len(items)} item(s)")
        return items

    async def click_product(self, index: int = 0) -> bool:
        """
        Open the product at ``index`` of the listing.

        Returns:
            True if clicked, False if ``index`` is out of range (no-op)
        """
        await self.actions.wait_visible("product_items", timeout=self.listing_timeout)
        return await self.actions.click_nth("product_items", index)

    # =========================================================================
    # Product detail
    # =========================================================================

    async def select_size(self, size: str) -> bool:
        """
        Click the size swatch whose text is exactly ``size``.

        Returns:
            True if a swatch was clicked, False when no swatch matched
        """
        return await self.actions.click_by_text("size_options", size)

    async def select_color(self, index: int = 0) -> bool:
        """
        Click the color swatch at ``index``.

        Returns:
            True if clicked, False if ``index`` is out of range (no-op)
        """
        return await self.actions.click_nth("color_options", index)

    async def set_quantity(self, quantity: int) -> None:
        await self.actions.fill("quantity_input", str(quantity))

    async def add_to_cart(self) -> None:
        """Press add-to-cart. No option checks: the store validates selections."""
        await self.actions.click("add_to_cart_button")

    @allure.step("Add product to cart (size={size}, color={color_index}, qty={quantity})")
    async def add_product_to_cart(
        self,
        size: str = "M",
        color_index: int = 0,
        quantity: int = 1,
    ) -> None:
        """Select size, then color, then quantity, then submit."""
        if not await self.select_size(size):
            logger.warning(f"Size '{size}' not offered; submitting without it")
        if not await self.select_color(color_index):
            logger.warning(f"Color index {color_index} not offered; submitting without it")
        await self.set_quantity(quantity)
        await self.add_to_cart()

    # =========================================================================
    # Cart queries
    # =========================================================================

    async def is_product_added_to_cart(self) -> bool:
        """
        Wait for the add-to-cart success message.

        Returns:
            True if it appeared within the bound, False on timeout
        """
        added = await self.actions.wait_visible("success_message", timeout=self.cart_success_timeout)
        logger.info(f"Product added to cart: {added}")
        return added

    async def get_cart_count(self) -> int:
        """Numeric value of the cart badge; 0 when absent or unreadable."""
        text = await self.actions.text_or_empty("cart_counter", timeout=self.cart_count_timeout)
        return parse_cart_count(text)

    async def get_success_message(self) -> str:
        return await self.actions.text_if_visible("success_message")

    async def is_visible(self, element_name: str, timeout: int = 0) -> bool:
        """Visibility of a declared element, optionally waiting up to ``timeout`` ms."""
        return await self.actions.is_visible(element_name, timeout=timeout)

    async def count(self, element_name: str) -> int:
        return await self.actions.count(element_name)
