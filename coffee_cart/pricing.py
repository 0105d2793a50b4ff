"""Line and cart totals in exact decimal arithmetic."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from coffee_cart.catalog import MenuCatalog
from coffee_cart.constant import DISCOUNT_NAME_PREFIX
from coffee_cart.models import AnyEntry, CartEntry, CartLine, DiscountEntry

CENT = Decimal("0.01")


def to_money(value: Decimal) -> Decimal:
    if not isinstance(value, Decimal):
        raise TypeError(f"Money amounts must be Decimal, got {type(value).__name__}")
    return value.quantize(CENT)


def line_total(unit_price: Decimal, quantity: int) -> Decimal:
    return to_money(unit_price * quantity)


def entry_unit_price(catalog: MenuCatalog, entry: AnyEntry) -> Decimal:
    if isinstance(entry, DiscountEntry):
        return to_money(entry.fixed_price)
    return to_money(catalog.get(entry.item_id).unit_price)


def entry_name(catalog: MenuCatalog, entry: AnyEntry) -> str:
    if isinstance(entry, DiscountEntry):
        return DISCOUNT_NAME_PREFIX + catalog.get(entry.source_item_id).english_name
    return catalog.get(entry.item_id).english_name


def total(catalog: MenuCatalog, entries: Iterable[CartEntry], discounts: Iterable[DiscountEntry] = ()) -> Decimal:
    """Sum unit price x quantity over ordinary entries plus fixed price x quantity over discounts."""
    amount = Decimal("0.00")
    for entry in entries:
        amount += line_total(entry_unit_price(catalog, entry), entry.quantity)
    for discount in discounts:
        amount += line_total(entry_unit_price(catalog, discount), discount.quantity)
    if amount < 0:
        raise AssertionError(f"cart total went negative: {amount}")
    return to_money(amount)


def cart_total(catalog: MenuCatalog, entries: Iterable[AnyEntry]) -> Decimal:
    """Total over a mixed snapshot as returned by ``CartStore.entries()``."""
    ordinary: list[CartEntry] = []
    discounts: list[DiscountEntry] = []
    for entry in entries:
        if isinstance(entry, DiscountEntry):
            discounts.append(entry)
        else:
            ordinary.append(entry)
    return total(catalog, ordinary, discounts)


def price_lines(catalog: MenuCatalog, entries: Iterable[AnyEntry]) -> list[CartLine]:
    lines = []
    for entry in entries:
        unit_price = entry_unit_price(catalog, entry)
        lines.append(
            CartLine(
                entry_id=entry.entry_id,
                kind=entry.kind,
                name=entry_name(catalog, entry),
                unit_price=unit_price,
                quantity=entry.quantity,
                line_total=line_total(unit_price, entry.quantity),
            )
        )
    return lines


def sort_lines(lines: Iterable[CartLine]) -> list[CartLine]:
    """Order lines by display name (ordinal comparison), ties broken by entry id."""
    return sorted(lines, key=lambda line: (line.name, line.entry_id))


def format_money(amount: Decimal) -> str:
    return f"${to_money(amount):.2f}"


def format_total(amount: Decimal) -> str:
    return f"Total: {format_money(amount)}"
