"""Static menu catalog."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Iterator

from coffee_cart.constant import COFFEE_META_BY_ID, LANGUAGE_CHINESE, LANGUAGE_ENGLISH, MENU_ITEM_IDS
from coffee_cart.errors import UnknownItem
from coffee_cart.models import MenuItem


class MenuCatalog:
    """Immutable, ordered set of menu items."""

    def __init__(self, items: Iterable[MenuItem]) -> None:
        by_id: dict[str, MenuItem] = {}
        for item in items:
            if item.item_id in by_id:
                raise ValueError(f"Duplicate menu item id: {item.item_id!r}")
            if item.unit_price < 0:
                raise ValueError(f"Negative price for {item.item_id!r}")
            by_id[item.item_id] = item
        self._by_id = by_id
        self._order = tuple(by_id)

    def get(self, item_id: str) -> MenuItem:
        try:
            return self._by_id[item_id]
        except KeyError:
            raise UnknownItem(item_id) from None

    def items(self) -> tuple[MenuItem, ...]:
        return tuple(self._by_id[item_id] for item_id in self._order)

    def display_name(self, item_id: str, language: str = LANGUAGE_ENGLISH) -> str:
        item = self.get(item_id)
        if language == LANGUAGE_CHINESE:
            return item.localized_name
        return item.english_name

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self.items())

    def __len__(self) -> int:
        return len(self._order)


def load_default_catalog() -> MenuCatalog:
    """Build the catalog from the editable menu table."""
    return MenuCatalog(
        MenuItem(
            item_id=item_id,
            english_name=COFFEE_META_BY_ID[item_id]["english_name"],
            localized_name=COFFEE_META_BY_ID[item_id]["localized_name"],
            unit_price=Decimal(COFFEE_META_BY_ID[item_id]["price"]),
        )
        for item_id in MENU_ITEM_IDS
    )
