"""
================================================================================
Registration Page Object (Async / Playwright)
================================================================================

Customer account creation form (/customer/account/create/).

Five inputs filled left to right, one error element per input plus a
general message area. Registration completes asynchronously relative to the
submit click, so get_contact_info() waits for the account block first.

================================================================================
"""

from __future__ import annotations

from typing import Optional, Tuple

import allure
from loguru import logger
from playwright.async_api import Page

from storefront_suites.ui_testing.framework.config_loader import ConfigLoader, get_config
from storefront_suites.ui_testing.framework.element_actions import ElementActions
from storefront_suites.ui_testing.framework.locator_registry import LocatorRegistry, SelectorRef
from storefront_suites.ui_testing.framework.wait_helpers import WaitConfig, wait_until_stable


class RegisterPage:
    """Registration page object (async)."""

    URL_PATH = "/customer/account/create/"

    LOCATORS = LocatorRegistry(
        SelectorRef("first_name_input", "#firstname"),
        SelectorRef("last_name_input", "#lastname"),
        SelectorRef("email_input", "#email_address"),
        SelectorRef("password_input", "#password"),
        SelectorRef("confirm_password_input", "#password-confirmation"),
        SelectorRef(
            "create_account_button",
            'form#form-validate button.action.submit.primary[title="Create an Account"]',
            ("button.action.submit.primary:has-text('Create an Account')",),
        ),
        SelectorRef("first_name_error", "#firstname-error"),
        SelectorRef("last_name_error", "#lastname-error"),
        SelectorRef("email_error", "#email_address-error"),
        SelectorRef("password_error", "#password-error"),
        SelectorRef("confirm_password_error", "#password-confirmation-error"),
        SelectorRef(
            "general_error",
            'div[data-bind="html: $parent.prepareMessageForHtml(message.text)"]',
        ),
        SelectorRef("contact_info", ".box.box-information .box-content p"),
        SelectorRef("consent_button", '[class="fc-button-label"]'),
    )

    ERROR_ELEMENTS: Tuple[str, ...] = (
        "first_name_error",
        "last_name_error",
        "email_error",
        "password_error",
        "confirm_password_error",
        "general_error",
    )

    def __init__(self, page: Page, base_url: str = "", config: Optional[ConfigLoader] = None):
        config = config or get_config()
        self.page = page
        self.base_url = (base_url or config.storefront.base_url).rstrip("/")
        self.actions = ElementActions(page, self.LOCATORS, config.timeouts.action)
        self.errors_wait = WaitConfig(timeout_ms=config.timeouts.errors_register)
        self.contact_info_timeout = config.timeouts.contact_info

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.URL_PATH}"

    @allure.step("Open registration page")
    async def open(self) -> "RegisterPage":
        await self.actions.goto(self.url)
        return self

    async def accept_consent(self) -> bool:
        return await self.actions.click_if_visible("consent_button")

    # =========================================================================
    # Actions
    # =========================================================================

    async def fill_first_name(self, first_name: str) -> None:
        await self.actions.fill("first_name_input", first_name)

    async def fill_last_name(self, last_name: str) -> None:
        await self.actions.fill("last_name_input", last_name)

    async def fill_email(self, email: str) -> None:
        await self.actions.fill("email_input", email)

    async def fill_password(self, password: str) -> None:
        await self.actions.fill("password_input", password)

    async def fill_confirm_password(self, confirm_password: str) -> None:
        await self.actions.fill("confirm_password_input", confirm_password)

    async def click_create_account(self) -> None:
        await self.actions.click("create_account_button")

    @allure.step("Register account (email={email})")
    async def register(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> None:
        """Fill all five fields left to right, then submit."""
        logger.info(f"Registering {first_name} {last_name} <{email}>")
        await self.fill_first_name(first_name)
        await self.fill_last_name(last_name)
        await self.fill_email(email)
        await self.fill_password(password)
        await self.fill_confirm_password(confirm_password)
        await self.click_create_account()

    # =========================================================================
    # Queries
    # =========================================================================

    async def get_first_name_error(self) -> str:
        return await self.actions.text_if_visible("first_name_error")

    async def get_last_name_error(self) -> str:
        return await self.actions.text_if_visible("last_name_error")

    async def get_email_error(self) -> str:
        return await self.actions.text_if_visible("email_error")

    async def get_password_error(self) -> str:
        return await self.actions.text_if_visible("password_error")

    async def get_confirm_password_error(self) -> str:
        return await self.actions.text_if_visible("confirm_password_error")

    async def get_general_error(self) -> str:
        return await self.actions.text_if_visible("general_error")

    async def get_contact_info(self) -> str:
        """
        Account summary after registration.

        Waits (bounded) for the contact block to appear, then applies the
        visible-or-empty convention.
        """
        await self.actions.wait_visible("contact_info", timeout=self.contact_info_timeout)
        return await self.actions.text_if_visible("contact_info")

    async def wait_for_errors(self) -> bool:
        """Bounded wait for validation errors to render and settle. Never raises."""
        settled, _ = await wait_until_stable(
            self._visible_errors,
            description="registration validation errors",
            config=self.errors_wait,
            accept=any,
        )
        return settled

    async def _visible_errors(self) -> Tuple[str, ...]:
        return tuple([await self.actions.text_if_visible(name) for name in self.ERROR_ELEMENTS])
