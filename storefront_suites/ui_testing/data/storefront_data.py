"""
================================================================================
Storefront Test Data
================================================================================

Credential sets, category parameters and expected messages consumed by the
UI scenarios.

Unique emails come from an injectable EmailFactory. The default factory
appends the current epoch milliseconds, so every process run registers a
fresh account; tests pass a fixed clock to make the data reproducible.

================================================================================
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from storefront_suites.ui_testing.framework.config_loader import StorefrontSettings


EmailFactory = Callable[[str], str]

DEFAULT_BASE_URL = StorefrontSettings.base_url
EXISTING_ACCOUNT_EMAIL = "zurid@mailinator.com"


def timestamp_email_factory(
    clock: Callable[[], float] = time.time,
    domain: str = "example.com",
) -> EmailFactory:
    """
    Build an EmailFactory that suffixes the local part with epoch milliseconds.

    Uniqueness holds across runs started at least one millisecond apart.

    >>> factory = timestamp_email_factory(clock=lambda: 1700000000.123)
    >>> factory("john.doe")
    'john.doe.1700000000123@example.com'
    """
    def make_email(local_part: str) -> str:
        return f"{local_part}.{int(clock() * 1000)}@{domain}"

    return make_email


# ================================================================================
# Data Models
# ================================================================================

@dataclass(frozen=True)
class RegistrationCredentials:
    first_name: str
    last_name: str
    email: str
    password: str
    confirm_password: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class LoginCredentials:
    email: str
    password: str


@dataclass(frozen=True)
class CategoryData:
    """Category navigation target and product option defaults."""
    category: str
    expected_url: str
    sizes: Tuple[str, ...]
    default_size: str
    default_quantity: int
    default_color_index: int = 0


@dataclass(frozen=True)
class CartExpectations:
    success_message: str


@dataclass(frozen=True)
class StorefrontData:
    """Everything a storefront scenario needs, built once per run."""
    registration: Mapping[str, RegistrationCredentials]
    login: Mapping[str, LoginCredentials]
    jackets: CategoryData
    cart: CartExpectations
    # Dashboard only; the create, login and logoutSuccess forms share the prefix
    account_url_pattern: str = field(default=r"/customer/account/(index/)?(\?.*)?$")


# ================================================================================
# Builders
# ================================================================================

def build_registration_credentials(make_email: EmailFactory) -> Mapping[str, RegistrationCredentials]:
    """Registration sets: valid, invalid_email, password_mismatch, weak_password, empty, existing_email."""
    return MappingProxyType({
        "valid": RegistrationCredentials(
            first_name="John",
            last_name="Doe",
            email=make_email("john.doe"),
            password="Password123!",
            confirm_password="Password123!",
        ),
        "invalid_email": RegistrationCredentials(
            first_name="Jane",
            last_name="Smith",
            email="invalid-email-format",
            password="Password123!",
            confirm_password="Password123!",
        ),
        "password_mismatch": RegistrationCredentials(
            first_name="Bob",
            last_name="Johnson",
            email=make_email("bob.johnson"),
            password="Password123!",
            confirm_password="DifferentPassword123!",
        ),
        "weak_password": RegistrationCredentials(
            first_name="Alice",
            last_name="Brown",
            email=make_email("alice.brown"),
            password="123",
            confirm_password="123",
        ),
        "empty": RegistrationCredentials(
            first_name="",
            last_name="",
            email="",
            password="",
            confirm_password="",
        ),
        "existing_email": RegistrationCredentials(
            first_name="Test",
            last_name="User",
            email=EXISTING_ACCOUNT_EMAIL,
            password="Password123!",
            confirm_password="Password123!",
        ),
    })


def build_login_credentials() -> Mapping[str, LoginCredentials]:
    """Login sets: valid, invalid, invalid_email_format, empty."""
    return MappingProxyType({
        "valid": LoginCredentials(
            email=EXISTING_ACCOUNT_EMAIL,
            password="zurid@mailinator.com123!",
        ),
        "invalid": LoginCredentials(
            email="invalid@example.com",
            password="wrongpassword",
        ),
        "invalid_email_format": LoginCredentials(
            email="invalid-email-format",
            password="password123",
        ),
        "empty": LoginCredentials(email="", password=""),
    })


def build_storefront_data(
    email_factory: Optional[EmailFactory] = None,
    base_url: str = DEFAULT_BASE_URL,
) -> StorefrontData:
    """
    Assemble the data bundle for one run.

    Args:
        email_factory: Generator for unique emails. Defaults to a
            timestamp-based factory evaluated now.
        base_url: Storefront root, used for expected destination URLs
    """
    make_email = email_factory or timestamp_email_factory()
    base_url = base_url.rstrip("/")
    return StorefrontData(
        registration=build_registration_credentials(make_email),
        login=build_login_credentials(),
        jackets=CategoryData(
            category="Men > Tops > Jackets",
            expected_url=f"{base_url}/men/tops-men/jackets-men.html",
            sizes=("XS", "S", "M", "L", "XL"),
            default_size="M",
            default_quantity=1,
        ),
        cart=CartExpectations(
            success_message="You added",
        ),
    )


__all__ = [
    "CartExpectations",
    "CategoryData",
    "DEFAULT_BASE_URL",
    "EmailFactory",
    "LoginCredentials",
    "RegistrationCredentials",
    "StorefrontData",
    "build_login_credentials",
    "build_registration_credentials",
    "build_storefront_data",
    "timestamp_email_factory",
]
