# ================================================================================
# Element Actions Module
# ================================================================================
#
# Async element interaction utilities shared by all page objects.
#
# Page objects compose an ElementActions instead of inheriting from a base
# page: the actions object owns the page handle and the page's LocatorRegistry,
# and every method takes a declared element name.
#
# Conventions:
#   - Actions (click, fill, hover) wait for their element and propagate
#     Playwright's TimeoutError when it never becomes actionable
#   - Queries (text, visibility, counts) absorb absence and timeouts and
#     return "", False, 0 or []
#   - Index and text picks return whether they acted instead of raising
#   - Every action is an Allure step and is logged through Loguru
#
# ================================================================================

import re
from typing import List, Optional, Pattern, Union

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .locator_registry import LocatorRegistry


DEFAULT_ACTION_TIMEOUT = 10000
DEFAULT_QUERY_TIMEOUT = 1000

_MASKED_FIELDS = ("password", "confirm")


def _display_value(name: str, value: str) -> str:
    """Mask secrets before they reach logs or the Allure report."""
    if any(marker in name.lower() for marker in _MASKED_FIELDS):
        return "*" * len(value)
    return value


class ElementActions:
    """
    Registry-aware element interaction helper.

    Example:
        actions = ElementActions(page, LoginPage.LOCATORS)
        await actions.fill("email_input", "john@example.com")
        await actions.click("sign_in_button")
        error = await actions.text_if_visible("email_error")
    """

    def __init__(
        self,
        page: Page,
        registry: LocatorRegistry,
        default_timeout: int = DEFAULT_ACTION_TIMEOUT,
    ):
        """
        Args:
            page: Playwright Page object (shared, not owned)
            registry: Element declarations of the owning page object
            default_timeout: Default timeout for actions in milliseconds
        """
        self.page = page
        self.registry = registry
        self.default_timeout = default_timeout

    def locator(self, name: str) -> Locator:
        """Fresh Locator for a declared element."""
        return self.registry.resolve(self.page, name)

    # =========================================================================
    # Actions
    # =========================================================================

    @allure.step("Click: {name}")
    async def click(self, name: str, timeout: Optional[int] = None) -> None:
        logger.info(f"Clicking: {name}")
        await self.locator(name).click(timeout=timeout or self.default_timeout)

    async def fill(self, name: str, value: str, timeout: Optional[int] = None) -> None:
        """
        Overwrite an input's value. Empty strings are written as-is.
        """
        shown = _display_value(name, value)
        with allure.step(f"Fill {name}: {shown}"):
            logger.info(f"Filling {name} with '{shown}'")
            await self.locator(name).fill(value, timeout=timeout or self.default_timeout)

    @allure.step("Hover: {name}")
    async def hover(self, name: str, timeout: Optional[int] = None) -> None:
        logger.info(f"Hovering over: {name}")
        await self.locator(name).hover(timeout=timeout or self.default_timeout)

    async def click_nth(self, name: str, index: int, timeout: Optional[int] = None) -> bool:
        """
        Click the element at ``index`` of the currently resolved list.

        Returns:
            True if the element existed and was clicked, False if ``index``
            was outside the list (nothing is clicked)
        """
        items = await self.snapshot(name)
        if not 0 <= index < len(items):
            logger.warning(f"No '{name}' at index {index} (found {len(items)}); skipping click")
            return False
        with allure.step(f"Click {name}[{index}]"):
            logger.info(f"Clicking {name}[{index}]")
            await items[index].click(timeout=timeout or self.default_timeout)
        return True

    async def click_by_text(
        self,
        name: str,
        text: str,
        timeout: Optional[int] = None,
    ) -> bool:
        """
        Click the first element whose visible text equals ``text`` exactly.

        Returns:
            True if a match was clicked, False if nothing matched
        """
        pattern: Pattern[str] = re.compile(rf"^\s*{re.escape(text)}\s*$")
        matches = self.locator(name).filter(has_text=pattern)
        if await matches.count() == 0:
            logger.warning(f"No '{name}' with text '{text}'; skipping click")
            return False
        with allure.step(f"Click {name} '{text}'"):
            logger.info(f"Clicking {name} '{text}'")
            await matches.first.click(timeout=timeout or self.default_timeout)
        return True

    async def click_if_visible(self, name: str) -> bool:
        """Click the first match only when it is already visible."""
        if not await self.is_visible(name):
            return False
        await self.locator(name).first.click(timeout=self.default_timeout)
        logger.debug(f"Clicked visible element: {name}")
        return True

    # =========================================================================
    # Queries
    # =========================================================================

    async def is_visible(self, name: str, timeout: int = 0) -> bool:
        """
        Visibility check that never raises.

        Args:
            name: Declared element name
            timeout: When > 0, wait up to this many milliseconds for the
                element to become visible before answering
        """
        if timeout > 0:
            return await self.wait_visible(name, timeout)
        try:
            return await self.locator(name).first.is_visible()
        except PlaywrightError as e:
            logger.debug(f"Visibility check for '{name}' failed: {e}")
            return False

    async def wait_visible(self, name: str, timeout: int = DEFAULT_QUERY_TIMEOUT) -> bool:
        """
        Wait for the first match to become visible.

        Returns:
            True if it became visible in time, False on timeout
        """
        try:
            await self.locator(name).first.wait_for(state="visible", timeout=timeout)
            return True
        except PlaywrightTimeoutError:
            logger.debug(f"'{name}' not visible within {timeout}ms")
            return False

    async def text_if_visible(self, name: str) -> str:
        """
        Visible-or-empty read: the element's text if it is visible right now,
        otherwise an empty string.
        """
        if not await self.is_visible(name):
            return ""
        return await self.text_or_empty(name)

    async def text_or_empty(self, name: str, timeout: int = DEFAULT_QUERY_TIMEOUT) -> str:
        """Text content of the first match, or "" when unreadable in time."""
        try:
            text = await self.locator(name).first.text_content(timeout=timeout)
        except PlaywrightError as e:
            logger.debug(f"Could not read text of '{name}': {e}")
            return ""
        return (text or "").strip()

    async def snapshot(self, name: str) -> List[Locator]:
        """Resolve every current match into a fixed list of per-item locators."""
        return await self.locator(name).all()

    async def count(self, name: str) -> int:
        try:
            return await self.locator(name).count()
        except PlaywrightError as e:
            logger.debug(f"Could not count '{name}': {e}")
            return 0

    # =========================================================================
    # Navigation
    # =========================================================================

    @property
    def current_url(self) -> str:
        return self.page.url

    @allure.step("Navigate to {url}")
    async def goto(self, url: str, wait_until: str = "domcontentloaded", timeout: Optional[int] = None) -> None:
        logger.info(f"Navigating to: {url}")
        await self.page.goto(url, wait_until=wait_until, timeout=timeout)

    async def wait_for_url(
        self,
        url: Union[str, Pattern[str]],
        timeout: int = DEFAULT_ACTION_TIMEOUT,
    ) -> bool:
        """
        Wait for the page URL to match.

        Returns:
            True if the URL matched in time, False on timeout
        """
        try:
            await self.page.wait_for_url(url, timeout=timeout)
            return True
        except PlaywrightTimeoutError:
            logger.warning(f"URL did not match {url} within {timeout}ms (at {self.page.url})")
            return False

    # =========================================================================
    # Debug
    # =========================================================================

    async def screenshot(self, name: str, full_page: bool = True) -> bytes:
        """Take a screenshot and attach it to the Allure report."""
        image = await self.page.screenshot(full_page=full_page)
        allure.attach(image, name=name, attachment_type=allure.attachment_type.PNG)
        return image


__all__ = [
    "DEFAULT_ACTION_TIMEOUT",
    "DEFAULT_QUERY_TIMEOUT",
    "ElementActions",
]
