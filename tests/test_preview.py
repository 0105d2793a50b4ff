from decimal import Decimal

import pytest

from coffee_cart.cart import CartStore
from coffee_cart.catalog import MenuCatalog
from coffee_cart.errors import NotAvailable
from coffee_cart.models import MenuItem
from coffee_cart.preview import CartPreviewView
from coffee_cart.session import CartSession


def test_preview_missing_without_focus_or_items(small_catalog) -> None:
    preview = CartPreviewView(CartStore(small_catalog))

    preview.set_focus(True)
    assert not preview.is_visible
    with pytest.raises(NotAvailable):
        preview.entries()

    preview.set_focus(False)
    preview.cart.activate("a")
    assert not preview.is_visible
    with pytest.raises(NotAvailable):
        preview.entries()


def test_preview_lists_entries_in_alphabetical_order(session) -> None:
    for item in session.catalog:
        session.activate_item(item.item_id)
        if session.promotion_visible:
            session.discard_promotion()
    session.set_pay_focus(True)

    names = [line.name for line in session.preview()]
    assert len(names) == 9
    assert names == sorted(names)
    assert all(line.quantity == 1 for line in session.preview())


def test_preview_disappears_when_last_entry_removed(small_session) -> None:
    small_session.activate_item("a")
    small_session.activate_item("b")
    small_session.set_pay_focus(True)

    while small_session.preview_visible:
        first = small_session.preview()[0]
        small_session.decrement_entry(first.entry_id)

    with pytest.raises(NotAvailable):
        small_session.preview()


def test_preview_breaks_name_ties_by_item_id() -> None:
    catalog = MenuCatalog(
        [
            MenuItem("z", "Same", "同", Decimal("1.00")),
            MenuItem("a", "Same", "同", Decimal("1.00")),
            MenuItem("mocha", "Mocha", "摩卡", Decimal("8.00")),
        ]
    )
    session = CartSession(catalog)
    session.activate_item("z")
    session.activate_item("a")
    session.set_pay_focus(True)
    assert [line.entry_id for line in session.preview()] == ["a", "z"]
