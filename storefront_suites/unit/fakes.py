"""
In-memory stand-ins for Playwright's async Page and Locator.

FakePage holds a selector -> elements map that tests mutate directly.
FakeStorefront wires click/hover handlers onto that map so the page objects
and the shopping journey can run end to end without a browser.
"""

from __future__ import annotations

import fnmatch
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Pattern, Union

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from storefront_suites.ui_testing.framework.config_loader import ConfigLoader
from storefront_suites.ui_testing.pages.header_panel import HeaderPanel
from storefront_suites.ui_testing.pages.login_page import LoginPage
from storefront_suites.ui_testing.pages.product_page import ProductPage
from storefront_suites.ui_testing.pages.register_page import RegisterPage


BASE_URL = "https://shop.example.test"


@dataclass(eq=False)
class FakeElement:
    text: str = ""
    visible: bool = True
    value: str = ""
    on_click: Optional[Callable[["FakeElement"], None]] = None
    on_hover: Optional[Callable[["FakeElement"], None]] = None
    clicks: int = 0


class FakeLocator:
    """Lazily evaluated selection over a FakePage, mirroring the Locator calls the suite uses."""

    def __init__(
        self,
        page: "FakePage",
        selectors: List[str],
        filters: Optional[List[Union[str, Pattern[str]]]] = None,
        index: Optional[int] = None,
    ):
        self._page = page
        self._selectors = selectors
        self._filters = filters or []
        self._index = index

    # -- composition ----------------------------------------------------------

    def or_(self, other: "FakeLocator") -> "FakeLocator":
        return FakeLocator(self._page, self._selectors + other._selectors, self._filters)

    def filter(self, has_text: Union[str, Pattern[str], None] = None) -> "FakeLocator":
        filters = list(self._filters)
        if has_text is not None:
            filters.append(has_text)
        return FakeLocator(self._page, self._selectors, filters)

    @property
    def first(self) -> "FakeLocator":
        return self.nth(0)

    def nth(self, index: int) -> "FakeLocator":
        return FakeLocator(self._page, self._selectors, self._filters, index)

    # -- resolution -----------------------------------------------------------

    def _candidates(self) -> List[FakeElement]:
        seen: List[FakeElement] = []
        for selector in self._selectors:
            for element in self._page.elements.get(selector, []):
                if element not in seen:
                    seen.append(element)
        for text_filter in self._filters:
            if isinstance(text_filter, re.Pattern):
                seen = [e for e in seen if text_filter.search(e.text)]
            else:
                seen = [e for e in seen if text_filter in e.text]
        return seen

    def _matches(self) -> List[FakeElement]:
        candidates = self._candidates()
        if self._index is None:
            return candidates
        if 0 <= self._index < len(candidates):
            return [candidates[self._index]]
        return []

    def _single(self) -> Optional[FakeElement]:
        matches = self._matches()
        if len(matches) > 1:
            raise PlaywrightError(
                f"strict mode violation: {self._selectors} resolved to {len(matches)} elements"
            )
        return matches[0] if matches else None

    def _actionable(self, timeout: Optional[float]) -> FakeElement:
        element = self._single()
        if element is None or not element.visible:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self._selectors}")
        return element

    @property
    def name(self) -> str:
        suffix = "" if self._index is None else f"[{self._index}]"
        return f"{self._selectors[0]}{suffix}"

    # -- Locator API ----------------------------------------------------------

    async def all(self) -> List["FakeLocator"]:
        return [self.nth(i) for i in range(len(self._candidates()))]

    async def count(self) -> int:
        return len(self._matches())

    async def is_visible(self) -> bool:
        element = self._single()
        return bool(element and element.visible)

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        element = self._single()
        if state == "visible" and (element is None or not element.visible):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self._selectors}")

    async def text_content(self, timeout: Optional[float] = None) -> Optional[str]:
        element = self._single()
        if element is None:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded reading {self._selectors}")
        return element.text

    async def click(self, timeout: Optional[float] = None, **kwargs: Any) -> None:
        element = self._actionable(timeout)
        element.clicks += 1
        self._page.events.append(("click", self.name))
        if element.on_click:
            element.on_click(element)

    async def fill(self, value: str, timeout: Optional[float] = None) -> None:
        element = self._actionable(timeout)
        element.value = value
        self._page.events.append(("fill", self.name, value))

    async def hover(self, timeout: Optional[float] = None) -> None:
        element = self._actionable(timeout)
        self._page.events.append(("hover", self.name))
        if element.on_hover:
            element.on_hover(element)


class FakePage:
    """Selector map plus the Page calls the suite makes."""

    def __init__(self, url: str = "about:blank"):
        self.url = url
        self.elements: Dict[str, List[FakeElement]] = {}
        self.events: List[tuple] = []
        self.locator_calls = 0

    def locator(self, selector: str) -> FakeLocator:
        self.locator_calls += 1
        return FakeLocator(self, [selector])

    def add(self, selector: str, *elements: FakeElement) -> List[FakeElement]:
        self.elements.setdefault(selector, []).extend(elements)
        return self.elements[selector]

    def clear(self, selector: str) -> None:
        self.elements.pop(selector, None)

    async def goto(self, url: str, wait_until: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.events.append(("goto", url))
        self.url = url

    async def wait_for_url(self, url: Union[str, Pattern[str]], timeout: Optional[float] = None) -> None:
        if isinstance(url, re.Pattern):
            matched = bool(url.search(self.url))
        else:
            matched = self.url == url or fnmatch.fnmatch(self.url, url)
        if not matched:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for URL {url}")

    async def screenshot(self, full_page: bool = False, **kwargs: Any) -> bytes:
        return b"\x89PNG fake"


def selector(page_class: Any, name: str) -> str:
    """Primary selector of a declared element."""
    return page_class.LOCATORS.get(name).selector


FAST_TIMEOUTS: Dict[str, int] = {
    "action": 100,
    "navigation": 100,
    "errors_login": 300,
    "errors_register": 300,
    "contact_info": 100,
    "listing": 100,
    "product_detail": 100,
    "cart_success": 100,
    "cart_count": 100,
    "cart_badge": 300,
}


def make_config(**sections: Dict[str, Any]) -> ConfigLoader:
    """
    Real ConfigLoader over in-memory sections with short timeouts.

    Keyword arguments are merged into the matching section, e.g.
    ``make_config(browser={"type": "firefox"})``. Environment overrides are off.
    """
    data: Dict[str, Dict[str, Any]] = {
        "storefront": {"base_url": BASE_URL},
        "timeouts": dict(FAST_TIMEOUTS),
    }
    for name, values in sections.items():
        data.setdefault(name, {}).update(values)
    return ConfigLoader.from_dict(data)


@dataclass
class StoreState:
    accounts: Dict[str, Dict[str, str]] = field(default_factory=dict)
    customer: Optional[Dict[str, str]] = None
    size: Optional[str] = None
    color: Optional[int] = None
    cart: int = 0
    increments_cart: bool = True


class FakeStorefront(FakePage):
    """
    Scripted storefront covering the registration, login, category and
    product-detail screens used by the shopping journey.
    """

    SIZES = ("XS", "S", "M", "L", "XL")
    PRODUCTS = ("Proteus Fitness Jackshirt", "Montana Wind Jacket", "Jupiter All-Weather Trainer")
    COLORS = ("Black", "Blue", "Orange")

    def __init__(self, base_url: str = BASE_URL, known_accounts: Optional[Dict[str, Dict[str, str]]] = None):
        super().__init__()
        self.base_url = base_url
        self.state = StoreState(accounts=dict(known_accounts or {}))

    # -- routing --------------------------------------------------------------

    async def goto(self, url: str, wait_until: Optional[str] = None, timeout: Optional[float] = None) -> None:
        await super().goto(url, wait_until, timeout)
        self._route(url)

    def _route(self, url: str) -> None:
        self.url = url
        self.elements = {}
        self._render_header()
        path = url[len(self.base_url):]
        if path.startswith("/customer/account/create/"):
            self._render_register()
        elif path.startswith("/customer/account/login/"):
            self._render_login()
        elif path.startswith("/customer/account/logoutSuccess/"):
            pass
        elif path.startswith("/customer/account/"):
            self._render_account()
        elif path == "/men/tops-men/jackets-men.html":
            self._render_listing()
        elif path.startswith("/product/"):
            self._render_product()

    def _render_header(self) -> None:
        self.add(selector(ProductPage, "men_menu"), FakeElement("Men", on_hover=self._show_tops))
        self.add(selector(ProductPage, "cart_counter"), FakeElement(str(self.state.cart) if self.state.cart else ""))
        if self.state.customer:
            self.add(
                selector(HeaderPanel, "customer_menu_toggle"),
                FakeElement("Change", on_click=self._open_customer_menu),
                FakeElement("Change", visible=False),
            )

    def _show_tops(self, _: FakeElement) -> None:
        self.add(selector(ProductPage, "men_tops_submenu"), FakeElement("Tops", on_hover=self._show_jackets))

    def _show_jackets(self, _: FakeElement) -> None:
        self.add(
            selector(ProductPage, "men_jackets_submenu"),
            FakeElement("Jackets", on_click=lambda _: self._route(f"{self.base_url}/men/tops-men/jackets-men.html")),
        )

    def _open_customer_menu(self, _: FakeElement) -> None:
        self.add(
            selector(HeaderPanel, "logout_link"),
            FakeElement("Sign Out", on_click=self._logout),
            FakeElement("Sign Out", visible=False),
        )

    def _logout(self, _: FakeElement) -> None:
        self.state.customer = None
        self._route(f"{self.base_url}/customer/account/logoutSuccess/")

    # -- registration ---------------------------------------------------------

    def _render_register(self) -> None:
        for name in ("first_name_input", "last_name_input", "email_input", "password_input", "confirm_password_input"):
            self.add(selector(RegisterPage, name), FakeElement())
        self.add(selector(RegisterPage, "create_account_button"), FakeElement("Create an Account", on_click=self._submit_registration))

    def _field(self, page_class: Any, name: str) -> str:
        return self.elements[selector(page_class, name)][0].value

    def _submit_registration(self, _: FakeElement) -> None:
        values = {
            name: self._field(RegisterPage, f"{name}_input")
            for name in ("first_name", "last_name", "email", "password", "confirm_password")
        }
        errors = {f"{name}_error": "This is a required field." for name, value in values.items() if not value}
        if values["email"] and "@" not in values["email"]:
            errors["email_error"] = "Please enter a valid email address (Ex: johndoe@domain.com)."
        if values["password"] and len(values["password"]) < 8:
            errors["password_error"] = "Minimum length of this field must be equal or greater than 8 symbols."
        if values["confirm_password"] and values["confirm_password"] != values["password"]:
            errors["confirm_password_error"] = "Please enter the same value again."
        if not errors and values["email"] in self.state.accounts:
            errors["general_error"] = "There is already an account with this email address."

        if errors:
            for name, message in errors.items():
                self.add(selector(RegisterPage, name), FakeElement(message))
            return

        account = {
            "first_name": values["first_name"],
            "last_name": values["last_name"],
            "email": values["email"],
            "password": values["password"],
        }
        self.state.accounts[values["email"]] = account
        self.state.customer = account
        self._route(f"{self.base_url}/customer/account/")

    # -- login ----------------------------------------------------------------

    def _render_login(self) -> None:
        self.add(selector(LoginPage, "email_input"), FakeElement())
        self.add(selector(LoginPage, "password_input"), FakeElement())
        self.add(selector(LoginPage, "sign_in_button"), FakeElement("Sign In", on_click=self._submit_login))

    def _submit_login(self, _: FakeElement) -> None:
        email = self._field(LoginPage, "email_input")
        password = self._field(LoginPage, "password_input")
        if not email:
            self.add(selector(LoginPage, "email_error"), FakeElement("This is a required field."))
        if not password:
            self.add(selector(LoginPage, "password_error"), FakeElement("This is a required field."))
        if not email or not password:
            return

        account = self.state.accounts.get(email)
        if account is None or account["password"] != password:
            self.add(
                selector(LoginPage, "general_error"),
                FakeElement("The account sign-in was incorrect or your account is disabled temporarily."),
            )
            return

        self.state.customer = account
        self._route(f"{self.base_url}/customer/account/")

    def _render_account(self) -> None:
        customer = self.state.customer
        if customer is None:
            return
        self.add(
            selector(LoginPage, "contact_info"),
            FakeElement(f"\n{customer['first_name']} {customer['last_name']}\n{customer['email']}\n"),
        )

    # -- catalog --------------------------------------------------------------

    def _render_listing(self) -> None:
        for index, name in enumerate(self.PRODUCTS):
            self.add(
                selector(ProductPage, "product_items"),
                FakeElement(name, on_click=lambda _, i=index: self._route(f"{self.base_url}/product/{i}")),
            )

    def _render_product(self) -> None:
        self.state.size = None
        self.state.color = None
        for size in self.SIZES:
            self.add(selector(ProductPage, "size_options"), FakeElement(size, on_click=self._pick_size))
        for index, color in enumerate(self.COLORS):
            self.add(
                selector(ProductPage, "color_options"),
                FakeElement(color, on_click=lambda _, i=index: setattr(self.state, "color", i)),
            )
        self.add(selector(ProductPage, "quantity_input"), FakeElement(value="1"))
        self.add(selector(ProductPage, "add_to_cart_button"), FakeElement("Add to Cart", on_click=self._add_to_cart))

    def _pick_size(self, element: FakeElement) -> None:
        self.state.size = element.text

    def _add_to_cart(self, _: FakeElement) -> None:
        if self.state.size is None or self.state.color is None:
            return
        quantity = int(self._field(ProductPage, "quantity_input") or "1")
        if self.state.increments_cart:
            self.state.cart += quantity
        self.elements[selector(ProductPage, "cart_counter")] = [FakeElement(str(self.state.cart))]
        product = self.PRODUCTS[int(self.url.rsplit("/", 1)[-1])]
        self.elements[selector(ProductPage, "success_message")] = [
            FakeElement(f"You added {product} to your shopping cart.")
        ]
