import re
from decimal import Decimal

import pytest

from coffee_cart.catalog import MenuCatalog, load_default_catalog
from coffee_cart.errors import UnknownItem
from coffee_cart.models import MenuItem
from coffee_cart.pricing import format_money

ENGLISH_NAMES = [
    "Espresso",
    "Espresso Macchiato",
    "Cappuccino",
    "Mocha",
    "Flat White",
    "Americano",
    "Cafe Latte",
    "Espresso Con Panna",
    "Cafe Breve",
]

CHINESE_NAMES = [
    "特浓咖啡",
    "浓缩玛奇朵",
    "卡布奇诺",
    "摩卡",
    "平白咖啡",
    "美式咖啡",
    "拿铁",
    "浓缩康宝蓝",
    "半拿铁",
]


def test_default_catalog_lists_nine_coffees_in_menu_order() -> None:
    catalog = load_default_catalog()
    assert [item.english_name for item in catalog.items()] == ENGLISH_NAMES
    assert [item.localized_name for item in catalog.items()] == CHINESE_NAMES
    assert len(catalog) == 9


def test_default_prices_are_non_negative_and_formatted_with_cents() -> None:
    for item in load_default_catalog():
        assert item.unit_price >= 0
        assert re.fullmatch(r"\$[0-9]+\.[0-9]{2}", format_money(item.unit_price))


def test_display_name_switches_between_name_tables() -> None:
    catalog = load_default_catalog()
    assert catalog.display_name("mocha") == "Mocha"
    assert catalog.display_name("mocha", "zh") == "摩卡"


def test_unknown_item_is_rejected() -> None:
    catalog = load_default_catalog()
    assert "tea" not in catalog
    with pytest.raises(UnknownItem):
        catalog.get("tea")


def test_catalog_rejects_duplicate_ids_and_negative_prices() -> None:
    item = MenuItem("x", "X", "X", Decimal("1.00"))
    with pytest.raises(ValueError):
        MenuCatalog([item, item])
    with pytest.raises(ValueError):
        MenuCatalog([MenuItem("y", "Y", "Y", Decimal("-0.01"))])
