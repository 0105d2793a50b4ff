"""Checkout modal state and buyer input validation."""

from __future__ import annotations

import re
from enum import Enum

from coffee_cart.cart import CartStore
from coffee_cart.config import CONFIRMATION_SECONDS
from coffee_cart.constant import CONFIRMATION_MESSAGE
from coffee_cart.errors import NotAvailable, ValidationFailed
from coffee_cart.models import BuyerInput, CompletedOrder
from coffee_cart.pricing import cart_total, price_lines
from coffee_cart.promotion import PromotionEngine
from coffee_cart.timers import Scheduler, TimerHandle

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class CheckoutState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class ConfirmationSignal:
    """Purchase confirmation that hides itself after a fixed duration."""

    def __init__(self, scheduler: Scheduler, duration: float = CONFIRMATION_SECONDS) -> None:
        self.scheduler = scheduler
        self.duration = duration
        self.message = CONFIRMATION_MESSAGE
        self.visible = False
        self._handle: TimerHandle | None = None

    def show(self) -> None:
        self.cancel()
        self.visible = True
        self._handle = self.scheduler.call_later(self.duration, self._expire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self.visible = False

    def _expire(self) -> None:
        self._handle = None
        self.visible = False


def validate_buyer(buyer: BuyerInput) -> None:
    missing_name = not buyer.name.strip()
    invalid_email = EMAIL_PATTERN.match(buyer.email.strip()) is None
    if missing_name or invalid_email:
        raise ValidationFailed(missing_name=missing_name, invalid_email=invalid_email)


class CheckoutValidator:
    """Closed -> Open -> Closed on success, stays Open on failure."""

    def __init__(self, cart: CartStore, promotion: PromotionEngine, confirmation: ConfirmationSignal) -> None:
        self.cart = cart
        self.promotion = promotion
        self.confirmation = confirmation
        self.state = CheckoutState.CLOSED
        self.buyer: BuyerInput | None = None
        self.last_error: ValidationFailed | None = None

    @property
    def is_open(self) -> bool:
        return self.state is CheckoutState.OPEN

    def open(self) -> BuyerInput:
        # A new checkout cycle supersedes any confirmation still on screen.
        self.confirmation.cancel()
        self.state = CheckoutState.OPEN
        self.buyer = BuyerInput()
        self.last_error = None
        return self.buyer

    def submit(self, buyer: BuyerInput) -> CompletedOrder:
        if self.state is not CheckoutState.OPEN:
            raise NotAvailable("checkout")
        self.buyer = buyer
        try:
            validate_buyer(buyer)
        except ValidationFailed as exc:
            self.last_error = exc
            raise

        entries = self.cart.entries()
        order = CompletedOrder(
            buyer=buyer,
            lines=tuple(price_lines(self.cart.catalog, entries)),
            total=cart_total(self.cart.catalog, entries),
        )
        self.cart.reset()
        self.promotion.reset()
        self.close()
        self.confirmation.show()
        return order

    def close(self) -> None:
        self.state = CheckoutState.CLOSED
        self.buyer = None
        self.last_error = None
