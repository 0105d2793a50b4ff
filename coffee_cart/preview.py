"""Hover preview of the cart under the pay button."""

from __future__ import annotations

from coffee_cart.cart import CartStore
from coffee_cart.errors import NotAvailable
from coffee_cart.models import CartLine
from coffee_cart.pricing import price_lines, sort_lines


class CartPreviewView:
    """Sorted cart projection that exists only while the pay button has focus and the cart is non-empty."""

    def __init__(self, cart: CartStore) -> None:
        self.cart = cart
        self.focused = False

    def set_focus(self, focused: bool) -> None:
        self.focused = focused

    @property
    def is_visible(self) -> bool:
        return self.focused and not self.cart.is_empty()

    def entries(self) -> list[CartLine]:
        if not self.is_visible:
            raise NotAvailable("cart preview")
        return sort_lines(price_lines(self.cart.catalog, self.cart.entries()))
