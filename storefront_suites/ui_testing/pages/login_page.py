"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Customer sign-in form of the storefront (/customer/account/login/).

Design:
  - Elements are declared once in LOCATORS and resolved on every use
  - Error and account queries follow the visible-or-empty convention
  - wait_for_errors() polls until client-side validation has settled

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


class LoginPage:
    """Login page object (async)."""

    URL_PATH = "/customer/account/login/"

    LOCATORS = LocatorRegistry(
        SelectorRef("email_input", "#email"),
        SelectorRef("password_input", '#pass[name="login[password]"]'),
        SelectorRef("sign_in_button", "#send2", ("button.action.login.primary",)),
        SelectorRef("email_error", "#email-error"),
        SelectorRef("password_error", "#pass-error"),
        SelectorRef(
            "general_error",
            '.message-error div[data-bind="html: $parent.prepareMessageForHtml(message.text)"]',
        ),
        SelectorRef("contact_info", ".box.box-information .box-content p"),
        SelectorRef("consent_button", '[class="fc-button-label"]'),
    )

    ERROR_ELEMENTS: Tuple[str, ...] = ("email_error", "password_error", "general_error")

    def __init__(self, page: Page, base_url: str = "", config: Optional[ConfigLoader] = None):
        """
        Args:
            page: Playwright Page shared by the scenario
            base_url: Storefront root URL (defaults to storefront.base_url)
            config: Configuration source. Defaults to get_config().
        """
        config = config or get_config()
        self.page = page
        self.base_url = (base_url or config.storefront.base_url).rstrip("/")
        self.actions = ElementActions(page, self.LOCATORS, config.timeouts.action)
        self.errors_wait = WaitConfig(timeout_ms=config.timeouts.errors_login)

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.URL_PATH}"

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        await self.actions.goto(self.url)
        return self

    async def accept_consent(self) -> bool:
        """Dismiss the cookie-consent banner if it is showing."""
        return await self.actions.click_if_visible("consent_button")

    # =========================================================================
    # Actions
    # =========================================================================

    async def fill_email(self, email: str) -> None:
        await self.actions.fill("email_input", email)

    async def fill_password(self, password: str) -> None:
        await self.actions.fill("password_input", password)

    async def click_sign_in(self) -> None:
        """Submit the form. Does not wait for the resulting navigation."""
        await self.actions.click("sign_in_button")

    @allure.step("Login (email={email})")
    async def login(self, email: str, password: str) -> None:
        """
        Fill email, then password, then submit.

        The order is fixed: the form validates each field on blur.
        """
        logger.info(f"Logging in as {email!r}")
        await self.fill_email(email)
        await self.fill_password(password)
        await self.click_sign_in()

    # =========================================================================
    # Queries
    # =========================================================================

    async def get_email_error(self) -> str:
        return await self.actions.text_if_visible("email_error")

    async def get_password_error(self) -> str:
        return await self.actions.text_if_visible("password_error")

    async def get_general_error(self) -> str:
        return await self.actions.text_if_visible("general_error")

    async def get_contact_info(self) -> str:
        """Account summary shown after a successful sign-in, or ""."""
        return await self.actions.text_if_visible("contact_info")

    async def wait_for_errors(self) -> bool:
        """
        Synchronization point before reading error messages.

        Returns once at least one error is visible and the error texts are
        unchanged between two samples, or when the configured bound elapses.
        Never raises.

        Returns:
            True if the errors settled, False if the bound elapsed first
        """
        settled, errors = await wait_until_stable(
            self._visible_errors,
            description="login validation errors",
            config=self.errors_wait,
            accept=any,
        )
        logger.debug(f"Login errors after wait: {errors}")
        return settled

    async def _visible_errors(self) -> Tuple[str, ...]:
        return tuple([await self.actions.text_if_visible(name) for name in self.ERROR_ELEMENTS])
