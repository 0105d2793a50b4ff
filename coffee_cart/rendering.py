"""Rendering helpers for storefront rows."""

from __future__ import annotations

from rich.text import Text

from coffee_cart.constant import CART_LIST_HEADER
from coffee_cart.models import CartLine, EntryKind, MenuLine, NavLink
from coffee_cart.pricing import format_money

ACTIVE_LINK_STYLE = "bold #daa520"
DISCOUNT_STYLE = "bold #0b1f0f on #5fbf72"


def format_nav(links: list[NavLink]) -> Text:
    """Render the navigation bar with the current page highlighted."""
    text = Text()
    for idx, link in enumerate(links):
        if idx > 0:
            text.append("  |  ", style="dim")
        text.append(link.label, style=ACTIVE_LINK_STYLE if link.current else "")
    return text


def format_menu_line(line: MenuLine) -> Text:
    text = Text()
    text.append(line.name, style="bold")
    text.append(f" {line.price_text}", style="dim")
    return text


def format_unit_desc(line: CartLine) -> str:
    return f"{format_money(line.unit_price)} x {line.quantity}"


def format_cart_line(line: CartLine) -> Text:
    """Render one cart row as name, unit description, line total and its controls."""
    text = Text()
    if line.kind is EntryKind.DISCOUNT:
        text.append(line.name, style=DISCOUNT_STYLE)
    else:
        text.append(line.name)
    text.append(f"  {format_unit_desc(line)}  {format_money(line.line_total)}")
    controls = " [+][-]" if line.can_increment else " [-]"
    text.append(controls, style="dim")
    return text


def format_preview_line(line: CartLine) -> Text:
    text = Text()
    if line.kind is EntryKind.DISCOUNT:
        text.append(line.name, style=DISCOUNT_STYLE)
    else:
        text.append(line.name)
    text.append(f" x {line.quantity}")
    text.append(" [+][-]" if line.can_increment else " [-]", style="dim")
    return text


def format_list_header() -> Text:
    return Text("  ".join(CART_LIST_HEADER), style="bold underline")
