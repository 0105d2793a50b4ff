"""Cart contents: ordinary lines and promotion lines."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from coffee_cart.catalog import MenuCatalog
from coffee_cart.errors import EntryNotFound, IncrementNotAllowed
from coffee_cart.models import AnyEntry, CartEntry, DiscountEntry, discount_entry_id
from coffee_cart.pricing import to_money


@dataclass
class _DiscountSlot:
    fixed_price: Decimal
    quantity: int


class CartStore:
    """Mutable item -> quantity mapping.

    Ordinary entries are keyed by item id. Discount entries are keyed by
    ``discounted-<item id>`` and are only created through ``add_discount``.
    """

    def __init__(self, catalog: MenuCatalog) -> None:
        self.catalog = catalog
        self._ordinary: dict[str, int] = {}
        self._discounts: dict[str, _DiscountSlot] = {}

    def activate(self, item_id: str) -> CartEntry:
        """Add one unit of a menu item, creating the line on first use."""
        self.catalog.get(item_id)
        self._ordinary[item_id] = self._ordinary.get(item_id, 0) + 1
        self._check_invariants()
        return CartEntry(item_id, self._ordinary[item_id])

    def increment(self, entry_id: str) -> AnyEntry:
        if entry_id in self._ordinary:
            self._ordinary[entry_id] += 1
            self._check_invariants()
            return CartEntry(entry_id, self._ordinary[entry_id])
        if self._discount_source(entry_id) is not None:
            raise IncrementNotAllowed(entry_id)
        raise EntryNotFound(entry_id)

    def decrement(self, entry_id: str) -> AnyEntry | None:
        """Remove one unit. Returns the updated entry, or None once the line is gone."""
        if entry_id in self._ordinary:
            remaining = self._ordinary[entry_id] - 1
            if remaining == 0:
                del self._ordinary[entry_id]
                return None
            self._ordinary[entry_id] = remaining
            self._check_invariants()
            return CartEntry(entry_id, remaining)

        source = self._discount_source(entry_id)
        if source is None:
            raise EntryNotFound(entry_id)
        slot = self._discounts[source]
        if slot.quantity == 1:
            del self._discounts[source]
            return None
        slot.quantity -= 1
        self._check_invariants()
        return DiscountEntry(source, slot.fixed_price, slot.quantity)

    def remove_entry(self, entry_id: str) -> None:
        if entry_id in self._ordinary:
            del self._ordinary[entry_id]
            return
        source = self._discount_source(entry_id)
        if source is None:
            raise EntryNotFound(entry_id)
        del self._discounts[source]

    def add_discount(self, source_item_id: str, fixed_price: Decimal) -> DiscountEntry:
        self.catalog.get(source_item_id)
        fixed_price = to_money(fixed_price)
        slot = self._discounts.get(source_item_id)
        if slot is None:
            slot = _DiscountSlot(fixed_price=fixed_price, quantity=0)
            self._discounts[source_item_id] = slot
        slot.quantity += 1
        self._check_invariants()
        return DiscountEntry(source_item_id, slot.fixed_price, slot.quantity)

    def entries(self) -> tuple[AnyEntry, ...]:
        """Snapshot of current lines: ordinary lines first, in first-activation order."""
        ordinary = [CartEntry(item_id, quantity) for item_id, quantity in self._ordinary.items()]
        discounts = [
            DiscountEntry(source, slot.fixed_price, slot.quantity) for source, slot in self._discounts.items()
        ]
        return tuple(ordinary + discounts)

    def get(self, entry_id: str) -> AnyEntry:
        for entry in self.entries():
            if entry.entry_id == entry_id:
                return entry
        raise EntryNotFound(entry_id)

    def item_count(self) -> int:
        return sum(self._ordinary.values()) + sum(slot.quantity for slot in self._discounts.values())

    def is_empty(self) -> bool:
        return not self._ordinary and not self._discounts

    def reset(self) -> None:
        self._ordinary.clear()
        self._discounts.clear()

    def _discount_source(self, entry_id: str) -> str | None:
        for source in self._discounts:
            if discount_entry_id(source) == entry_id:
                return source
        return None

    def _check_invariants(self) -> None:
        for item_id, quantity in self._ordinary.items():
            if quantity < 1:
                raise AssertionError(f"cart entry {item_id!r} has quantity {quantity}")
        for source, slot in self._discounts.items():
            if slot.quantity < 1 or slot.fixed_price < 0:
                raise AssertionError(f"discount entry {source!r} is corrupt: {slot}")
