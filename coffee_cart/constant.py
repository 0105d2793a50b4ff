"""Editable static menu and storefront text."""

from __future__ import annotations

# Canonical coffee metadata consumed by coffee_cart.catalog (which wraps these into MenuItem instances).
COFFEE_META_BY_ID: dict[str, dict[str, str]] = {
    "espresso": {"english_name": "Espresso", "localized_name": "特浓咖啡", "price": "10.00"},
    "espresso_macchiato": {"english_name": "Espresso Macchiato", "localized_name": "浓缩玛奇朵", "price": "12.00"},
    "cappuccino": {"english_name": "Cappuccino", "localized_name": "卡布奇诺", "price": "19.00"},
    "mocha": {"english_name": "Mocha", "localized_name": "摩卡", "price": "8.00"},
    "flat_white": {"english_name": "Flat White", "localized_name": "平白咖啡", "price": "18.00"},
    "americano": {"english_name": "Americano", "localized_name": "美式咖啡", "price": "7.00"},
    "cafe_latte": {"english_name": "Cafe Latte", "localized_name": "拿铁", "price": "16.00"},
    "espresso_con_panna": {"english_name": "Espresso Con Panna", "localized_name": "浓缩康宝蓝", "price": "14.00"},
    "cafe_breve": {"english_name": "Cafe Breve", "localized_name": "半拿铁", "price": "15.00"},
}

MENU_ITEM_IDS: list[str] = [
    "espresso",
    "espresso_macchiato",
    "cappuccino",
    "mocha",
    "flat_white",
    "americano",
    "cafe_latte",
    "espresso_con_panna",
    "cafe_breve",
]

LANGUAGE_ENGLISH = "en"
LANGUAGE_CHINESE = "zh"

DISCOUNT_NAME_PREFIX = "(Discounted) "
PROMOTION_MESSAGE = "It's your lucky day! Get an extra cup of {name} for ${price}."

EMPTY_CART_MESSAGE = "No coffee, go add some."
CART_LIST_HEADER: tuple[str, str, str] = ("Item", "Unit", "Total")
CONFIRMATION_MESSAGE = "Thanks for your purchase. Please check your email for payment."

NAV_LABEL_MENU = "menu"
NAV_LABEL_CART = "cart ({count})"
NAV_LABEL_GITHUB = "github"
