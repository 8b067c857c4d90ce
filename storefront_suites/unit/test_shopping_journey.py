import pytest

from storefront_suites.ui_testing.framework.checkpoint import CheckpointError
from storefront_suites.ui_testing.scenarios.shopping_journey import ShoppingJourney
from storefront_suites.unit.fakes import BASE_URL, make_config


@pytest.fixture
def journey(storefront, storefront_data, fast_config) -> ShoppingJourney:
    return ShoppingJourney(storefront, storefront_data, base_url=BASE_URL, config=fast_config)


async def test_full_journey_passes_every_checkpoint(journey, storefront, storefront_data):
    checks = await journey.run()

    assert all(result.passed for result in checks.results)
    names = [result.name for result in checks.results]
    assert names[0] == "registration lands on account page"
    assert names[-1] == "cart count"
    assert storefront_data.registration["valid"].email in storefront.state.accounts
    assert storefront.state.cart == storefront_data.jackets.default_quantity


async def test_journey_logs_out_between_registration_and_login(journey, storefront):
    await journey.run()

    visited = [event[1] for event in storefront.events if event[0] == "goto"]
    assert visited == [
        f"{BASE_URL}/customer/account/create/",
        f"{BASE_URL}/customer/account/login/",
    ]
    assert storefront.state.customer["first_name"] == "Zuri"


async def test_stale_cart_badge_aborts_with_checkpoint_error(journey, storefront):
    storefront.state.increments_cart = False

    with pytest.raises(CheckpointError) as exc_info:
        await journey.run()

    assert exc_info.value.result.name == "cart count"
    assert exc_info.value.result.observed == 0


async def test_duplicate_registration_stops_before_login(journey, storefront, storefront_data):
    storefront.state.accounts[storefront_data.registration["valid"].email] = {"password": "taken"}

    with pytest.raises(CheckpointError) as exc_info:
        await journey.run()

    assert exc_info.value.result.name == "registration lands on account page"
    assert len(journey.checks.results) == 1
    assert all(event[1] != f"{BASE_URL}/customer/account/login/" for event in storefront.events)


async def test_wrong_login_password_aborts_at_login_checkpoint(journey, storefront, storefront_data):
    storefront.state.accounts[storefront_data.login["valid"].email]["password"] = "rotated-password"

    with pytest.raises(CheckpointError) as exc_info:
        await journey.run()

    assert exc_info.value.result.name == "login lands on account page"
    assert exc_info.value.result.observed == f"{BASE_URL}/customer/account/login/"
    assert storefront.state.customer is None
    assert all(event[1] != f"{BASE_URL}/men/tops-men/jackets-men.html" for event in storefront.events)


async def test_product_detail_checks_use_configured_bound(storefront, storefront_data, monkeypatch):
    journey = ShoppingJourney(
        storefront,
        storefront_data,
        base_url=BASE_URL,
        config=make_config(timeouts={"product_detail": 250}),
    )
    product_page = journey.product_page
    original_is_visible = product_page.is_visible
    waits = []

    async def recording_is_visible(element_name, timeout=0):
        waits.append((element_name, timeout))
        return await original_is_visible(element_name, timeout=timeout)

    monkeypatch.setattr(product_page, "is_visible", recording_is_visible)

    await journey.run()

    assert [wait for wait in waits if wait[1]] == [
        ("add_to_cart_button", 250),
        ("size_options", 250),
        ("color_options", 250),
    ]
