"""Loyalty promotion: every third ordinary addition offers a discounted cup."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from coffee_cart.cart import CartStore
from coffee_cart.config import PROMOTION_ITEM_ID, PROMOTION_PRICE, PROMOTION_THRESHOLD
from coffee_cart.constant import PROMOTION_MESSAGE
from coffee_cart.errors import NoPendingOffer, NotAvailable
from coffee_cart.models import DiscountEntry, PromotionOffer, PromotionState
from coffee_cart.pricing import to_money


class OfferStatus(str, Enum):
    IDLE = "idle"
    OFFER_PENDING = "offer_pending"


def _short_price(price: Decimal) -> str:
    if price == price.to_integral_value():
        return str(int(price))
    return f"{price:.2f}"


class PromotionEngine:
    """Counts ordinary additions and raises one offer per threshold multiple.

    Discount acquisitions never count toward the threshold. An offer left
    unanswered lapses on the next addition.
    """

    def __init__(
        self,
        cart: CartStore,
        threshold: int = PROMOTION_THRESHOLD,
        item_id: str = PROMOTION_ITEM_ID,
        price: Decimal = PROMOTION_PRICE,
    ) -> None:
        if threshold < 1:
            raise ValueError("threshold must be positive")
        cart.catalog.get(item_id)
        self.cart = cart
        self.threshold = threshold
        self.item_id = item_id
        self.price = to_money(price)
        self._counter = 0
        self._last_offered_multiple = 0
        self._status = OfferStatus.IDLE

    @property
    def status(self) -> OfferStatus:
        return self._status

    @property
    def state(self) -> PromotionState:
        return PromotionState(
            ordinary_item_counter=self._counter,
            offer_pending=self._status is OfferStatus.OFFER_PENDING,
        )

    @property
    def offer_pending(self) -> bool:
        return self._status is OfferStatus.OFFER_PENDING

    def record_addition(self) -> bool:
        """Count one ordinary addition. Returns True when this addition raised a new offer."""
        self._counter += 1
        if self._counter % self.threshold != 0:
            # An unanswered offer lapses on the next addition.
            self._status = OfferStatus.IDLE
            return False
        if self._counter <= self._last_offered_multiple:
            return False
        self._last_offered_multiple = self._counter
        if self._status is OfferStatus.OFFER_PENDING:
            return False
        self._status = OfferStatus.OFFER_PENDING
        return True

    def offer(self) -> PromotionOffer:
        if self._status is not OfferStatus.OFFER_PENDING:
            raise NotAvailable("promotion offer")
        name = self.cart.catalog.get(self.item_id).english_name
        return PromotionOffer(
            item_id=self.item_id,
            price=self.price,
            message=PROMOTION_MESSAGE.format(name=name, price=_short_price(self.price)),
        )

    def accept(self) -> DiscountEntry:
        if self._status is not OfferStatus.OFFER_PENDING:
            raise NoPendingOffer()
        entry = self.cart.add_discount(self.item_id, self.price)
        self._status = OfferStatus.IDLE
        return entry

    def discard(self) -> None:
        if self._status is not OfferStatus.OFFER_PENDING:
            raise NoPendingOffer()
        self._status = OfferStatus.IDLE

    def reset(self) -> None:
        self._counter = 0
        self._last_offered_multiple = 0
        self._status = OfferStatus.IDLE
