import time

from storefront_suites.ui_testing.framework.wait_helpers import WaitConfig, wait_until, wait_until_stable
from storefront_suites.ui_testing.pages.login_page import LoginPage
from storefront_suites.ui_testing.pages.register_page import RegisterPage
from storefront_suites.ui_testing.scenarios.shopping_journey import ShoppingJourney
from storefront_suites.unit.fakes import make_config


FAST = WaitConfig(timeout_ms=200, interval_ms=10)


def test_call_site_bounds_come_from_configured_timeouts(fake_page, storefront_data):
    config = make_config(timeouts={"errors_login": 1500, "errors_register": 750, "cart_badge": 4000})

    assert LoginPage(fake_page, config=config).errors_wait.timeout_ms == 1500
    assert RegisterPage(fake_page, config=config).errors_wait.timeout_ms == 750
    assert ShoppingJourney(fake_page, storefront_data, config=config).cart_badge_wait.timeout_ms == 4000


async def test_wait_until_returns_true_once_condition_holds():
    calls = []

    async def check():
        calls.append(1)
        return len(calls) >= 3

    assert await wait_until(check, config=FAST) is True
    assert len(calls) == 3


async def test_wait_until_returns_false_at_bound():
    async def never():
        return False

    started = time.monotonic()
    assert await wait_until(never, config=FAST) is False
    assert time.monotonic() - started < 0.2 + 0.3


async def test_wait_until_treats_errors_as_failed_samples():
    attempts = []

    async def flaky():
        attempts.append(1)
        if len(attempts) < 2:
            raise RuntimeError("detached")
        return True

    assert await wait_until(flaky, config=FAST) is True


async def test_wait_until_stable_needs_two_equal_accepted_samples():
    samples = iter([(), ("Required",), ("Required", "Too short"), ("Required", "Too short")])

    async def sample():
        return next(samples)

    settled, value = await wait_until_stable(sample, config=FAST, accept=any)

    assert settled is True
    assert value == ("Required", "Too short")


async def test_wait_until_stable_ignores_equal_but_rejected_samples():
    async def sample():
        return ("", "")

    settled, value = await wait_until_stable(sample, config=FAST, accept=any)

    assert settled is False
    assert value == ("", "")
