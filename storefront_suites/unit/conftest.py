"""
Fixtures for browser-free unit tests of the UI framework and page objects.
"""

import pytest

from storefront_suites.ui_testing.data.storefront_data import build_storefront_data, timestamp_email_factory
from storefront_suites.ui_testing.framework.config_loader import ConfigLoader
from storefront_suites.unit.fakes import BASE_URL, FakePage, FakeStorefront, make_config


FIXED_CLOCK = 1700000000.123


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage(url=f"{BASE_URL}/")


@pytest.fixture
def fast_config() -> ConfigLoader:
    return make_config()


@pytest.fixture
def storefront_data():
    return build_storefront_data(
        email_factory=timestamp_email_factory(clock=lambda: FIXED_CLOCK),
        base_url=BASE_URL,
    )


@pytest.fixture
def storefront(storefront_data) -> FakeStorefront:
    """Scripted storefront that already knows the fixed login account."""
    known = storefront_data.login["valid"]
    return FakeStorefront(
        known_accounts={
            known.email: {
                "first_name": "Zuri",
                "last_name": "Dale",
                "email": known.email,
                "password": known.password,
            }
        }
    )
