"""Domain models for the coffee cart."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class MenuItem:
    """A purchasable coffee with both display names."""

    item_id: str
    english_name: str
    localized_name: str
    unit_price: Decimal


class EntryKind(str, Enum):
    ORDINARY = "ordinary"
    DISCOUNT = "discount"


@dataclass(frozen=True)
class CartEntry:
    """An ordinary cart line priced at the catalog unit price."""

    item_id: str
    quantity: int

    @property
    def entry_id(self) -> str:
        return self.item_id

    @property
    def kind(self) -> EntryKind:
        return EntryKind.ORDINARY


@dataclass(frozen=True)
class DiscountEntry:
    """A promotion line at a fixed price. It can only be decremented or removed."""

    source_item_id: str
    fixed_price: Decimal
    quantity: int

    @property
    def entry_id(self) -> str:
        return discount_entry_id(self.source_item_id)

    @property
    def kind(self) -> EntryKind:
        return EntryKind.DISCOUNT


AnyEntry = CartEntry | DiscountEntry


def discount_entry_id(source_item_id: str) -> str:
    return f"discounted-{source_item_id}"


@dataclass(frozen=True)
class CartLine:
    """A priced, displayable cart line."""

    entry_id: str
    kind: EntryKind
    name: str
    unit_price: Decimal
    quantity: int
    line_total: Decimal

    @property
    def can_increment(self) -> bool:
        return self.kind is EntryKind.ORDINARY


@dataclass(frozen=True)
class PromotionState:
    ordinary_item_counter: int = 0
    offer_pending: bool = False


@dataclass(frozen=True)
class PromotionOffer:
    """The offer currently shown to the buyer."""

    item_id: str
    price: Decimal
    message: str


@dataclass(frozen=True)
class BuyerInput:
    name: str = ""
    email: str = ""
    wants_promotional_emails: bool = False


@dataclass(frozen=True)
class CompletedOrder:
    """What was bought in an accepted checkout."""

    buyer: BuyerInput
    lines: tuple[CartLine, ...]
    total: Decimal


@dataclass(frozen=True)
class NavLink:
    label: str
    route: str
    current: bool


@dataclass(frozen=True)
class MenuLine:
    item_id: str
    name: str
    price_text: str
