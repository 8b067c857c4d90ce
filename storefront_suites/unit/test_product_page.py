import pytest

from storefront_suites.ui_testing.pages.product_page import ProductPage, parse_cart_count
from storefront_suites.unit.fakes import BASE_URL, FakeElement, selector


JACKETS_URL = f"{BASE_URL}/men/tops-men/jackets-men.html"


@pytest.fixture
def product_page(storefront, fast_config) -> ProductPage:
    return ProductPage(storefront, config=fast_config)


@pytest.fixture
async def product_detail(product_page, storefront) -> ProductPage:
    await storefront.goto(JACKETS_URL)
    assert await product_page.click_product(0) is True
    return product_page


@pytest.mark.parametrize(
    "text, expected",
    [("3", 3), (" 12 ", 12), ("7 items", 7), ("", 0), (None, 0), ("n/a", 0), ("-1", 0)],
)
def test_parse_cart_count(text, expected):
    assert parse_cart_count(text) == expected


async def test_navigate_hovers_in_order_then_clicks(product_page, storefront):
    await storefront.goto(f"{BASE_URL}/")
    storefront.events.clear()

    await product_page.navigate_to_men_jackets()

    assert storefront.events == [
        ("hover", selector(ProductPage, "men_menu")),
        ("hover", selector(ProductPage, "men_tops_submenu")),
        ("click", selector(ProductPage, "men_jackets_submenu")),
    ]
    assert storefront.url == JACKETS_URL


async def test_get_product_items_returns_snapshot(product_page, storefront):
    await storefront.goto(JACKETS_URL)

    items = await product_page.get_product_items()

    assert len(items) == len(storefront.PRODUCTS)


async def test_get_product_items_is_empty_when_listing_never_renders(product_page, storefront):
    await storefront.goto(f"{BASE_URL}/")
    assert await product_page.get_product_items() == []


@pytest.mark.parametrize("index", [3, 10, -1])
async def test_click_product_out_of_range_is_a_no_op(product_page, storefront, index):
    await storefront.goto(JACKETS_URL)

    assert await product_page.click_product(index) is False
    assert storefront.url == JACKETS_URL


async def test_click_product_opens_detail(product_detail, storefront):
    assert storefront.url == f"{BASE_URL}/product/0"
    for element in ("add_to_cart_button", "size_options", "color_options"):
        assert await product_detail.is_visible(element, timeout=50) is True


async def test_select_size_matches_exact_text(product_detail, storefront):
    assert await product_detail.select_size("S") is True
    assert storefront.state.size == "S"

    assert await product_detail.select_size("XXL") is False
    assert storefront.state.size == "S"


async def test_select_color_out_of_range_is_a_no_op(product_detail, storefront):
    assert await product_detail.select_color(len(storefront.COLORS)) is False
    assert storefront.state.color is None

    assert await product_detail.select_color(1) is True
    assert storefront.state.color == 1


async def test_set_quantity_overwrites_field(product_detail, storefront):
    await product_detail.set_quantity(3)
    assert storefront.elements[selector(ProductPage, "quantity_input")][0].value == "3"


async def test_add_to_cart_without_selection_is_not_added(product_detail):
    await product_detail.add_to_cart()

    assert await product_detail.is_product_added_to_cart() is False
    assert await product_detail.get_success_message() == ""


async def test_add_product_to_cart_selects_in_order(product_detail, storefront):
    storefront.events.clear()

    await product_detail.add_product_to_cart("M", 0, 1)

    targets = [event[1] for event in storefront.events]
    assert targets == [
        f"{selector(ProductPage, 'size_options')}[0]",
        f"{selector(ProductPage, 'color_options')}[0]",
        selector(ProductPage, "quantity_input"),
        selector(ProductPage, "add_to_cart_button"),
    ]


@pytest.mark.parametrize("quantity", [1, 2, 5])
async def test_add_product_to_cart_increments_count_by_quantity(product_detail, quantity):
    before = await product_detail.get_cart_count()

    await product_detail.add_product_to_cart("L", 2, quantity)

    assert await product_detail.is_product_added_to_cart() is True
    assert "You added" in await product_detail.get_success_message()
    assert await product_detail.get_cart_count() == before + quantity


async def test_cart_count_is_zero_without_badge(product_page, storefront):
    storefront.clear(selector(ProductPage, "cart_counter"))
    assert await product_page.get_cart_count() == 0


async def test_cart_count_is_zero_for_unparseable_badge(product_page, storefront):
    storefront.add(selector(ProductPage, "cart_counter"), FakeElement("loading"))
    assert await product_page.get_cart_count() == 0
