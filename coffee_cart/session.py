"""One storefront session: the single owner of cart, promotion and checkout state."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Iterator

from coffee_cart.cart import CartStore
from coffee_cart.catalog import MenuCatalog, load_default_catalog
from coffee_cart.checkout import CheckoutValidator, ConfirmationSignal
from coffee_cart.config import (
    CONFIRMATION_SECONDS,
    PROMOTION_ITEM_ID,
    PROMOTION_PRICE,
    PROMOTION_THRESHOLD,
    ROUTE_CART,
    ROUTE_GITHUB,
    ROUTE_MENU,
    ROUTES,
)
from coffee_cart.constant import (
    LANGUAGE_CHINESE,
    LANGUAGE_ENGLISH,
    NAV_LABEL_CART,
    NAV_LABEL_GITHUB,
    NAV_LABEL_MENU,
)
from coffee_cart.debug_log import log_debug
from coffee_cart.errors import CartError, NotAvailable, UnknownRoute, ValidationFailed
from coffee_cart.models import (
    AnyEntry,
    BuyerInput,
    CartEntry,
    CartLine,
    CompletedOrder,
    DiscountEntry,
    EntryKind,
    MenuLine,
    NavLink,
    PromotionOffer,
)
from coffee_cart.preview import CartPreviewView
from coffee_cart.pricing import cart_total, format_money, format_total, price_lines, sort_lines
from coffee_cart.promotion import PromotionEngine
from coffee_cart.timers import Scheduler, VirtualScheduler


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything the storefront can observe at one instant."""

    route: str
    nav_links: tuple[NavLink, ...]
    menu: tuple[MenuLine, ...]
    lines: tuple[CartLine, ...]
    total: Decimal
    total_text: str
    promotion_offer: PromotionOffer | None
    preview: tuple[CartLine, ...] | None
    checkout_open: bool
    validation_error: ValidationFailed | None
    confirmation_visible: bool


class CartSession:
    """Applies storefront events one at a time against a single shared state.

    Every event either applies completely or raises a ``CartError`` having
    changed nothing.
    """

    def __init__(
        self,
        catalog: MenuCatalog | None = None,
        scheduler: Scheduler | None = None,
        *,
        promotion_threshold: int = PROMOTION_THRESHOLD,
        promotion_item_id: str = PROMOTION_ITEM_ID,
        promotion_price: Decimal = PROMOTION_PRICE,
        confirmation_seconds: float = CONFIRMATION_SECONDS,
        log: Callable[..., None] = log_debug,
    ) -> None:
        self.catalog = catalog if catalog is not None else load_default_catalog()
        self.scheduler = scheduler if scheduler is not None else VirtualScheduler()
        self.cart = CartStore(self.catalog)
        self.promotion = PromotionEngine(
            self.cart,
            threshold=promotion_threshold,
            item_id=promotion_item_id,
            price=promotion_price,
        )
        self.preview_view = CartPreviewView(self.cart)
        self.confirmation = ConfirmationSignal(self.scheduler, confirmation_seconds)
        self.checkout = CheckoutValidator(self.cart, self.promotion, self.confirmation)
        self.route = ROUTE_MENU
        self._languages: dict[str, str] = {}
        self._lock = threading.Lock()
        self._log = log

    @contextmanager
    def _transition(self, event: str, **fields: Any) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            raise RuntimeError(f"{event} arrived while another event was being applied")
        try:
            yield
        except CartError as exc:
            self._log(f"{event}_rejected", error=str(exc), **fields)
            raise
        else:
            self._log(event, total=str(self.total()), **fields)
        finally:
            self._lock.release()

    # Inbound events

    def activate_item(self, item_id: str) -> CartEntry:
        with self._transition("activate_item", item_id=item_id):
            entry = self.cart.activate(item_id)
            self.promotion.record_addition()
        return entry

    def increment_entry(self, entry_id: str) -> AnyEntry:
        with self._transition("increment_entry", entry_id=entry_id):
            entry = self.cart.increment(entry_id)
            if entry.kind is EntryKind.ORDINARY:
                self.promotion.record_addition()
        return entry

    def decrement_entry(self, entry_id: str) -> AnyEntry | None:
        with self._transition("decrement_entry", entry_id=entry_id):
            entry = self.cart.decrement(entry_id)
        return entry

    def remove_entry(self, entry_id: str) -> None:
        with self._transition("remove_entry", entry_id=entry_id):
            self.cart.remove_entry(entry_id)

    def accept_promotion(self) -> DiscountEntry:
        with self._transition("accept_promotion"):
            entry = self.promotion.accept()
        return entry

    def discard_promotion(self) -> None:
        with self._transition("discard_promotion"):
            self.promotion.discard()

    def open_checkout(self) -> BuyerInput:
        with self._transition("open_checkout"):
            buyer = self.checkout.open()
        return buyer

    def submit_checkout(self, buyer: BuyerInput) -> CompletedOrder:
        with self._transition("submit_checkout", lines=len(self.cart.entries())):
            order = self.checkout.submit(buyer)
        return order

    def close_checkout(self) -> None:
        with self._transition("close_checkout"):
            self.checkout.close()

    def navigate_to(self, route: str) -> None:
        with self._transition("navigate_to", route=route):
            if route not in ROUTES:
                raise UnknownRoute(route)
            self.route = route
            self.preview_view.set_focus(False)
            if self.checkout.is_open:
                self.checkout.close()

    def set_pay_focus(self, focused: bool) -> None:
        with self._transition("set_pay_focus", focused=focused):
            self.preview_view.set_focus(focused)

    def toggle_item_language(self, item_id: str) -> str:
        """Flip one menu header between the English and Chinese name tables."""
        with self._transition("toggle_item_language", item_id=item_id):
            self.catalog.get(item_id)
            current = self._languages.get(item_id, LANGUAGE_ENGLISH)
            language = LANGUAGE_CHINESE if current == LANGUAGE_ENGLISH else LANGUAGE_ENGLISH
            self._languages[item_id] = language
        return language

    # Outbound observations

    def menu(self) -> list[MenuLine]:
        return [
            MenuLine(
                item_id=item.item_id,
                name=self.catalog.display_name(item.item_id, self._languages.get(item.item_id, LANGUAGE_ENGLISH)),
                price_text=format_money(item.unit_price),
            )
            for item in self.catalog.items()
        ]

    def lines(self) -> list[CartLine]:
        return sort_lines(price_lines(self.catalog, self.cart.entries()))

    def total(self) -> Decimal:
        return cart_total(self.catalog, self.cart.entries())

    def total_text(self) -> str:
        return format_total(self.total())

    def item_count(self) -> int:
        return self.cart.item_count()

    @property
    def promotion_visible(self) -> bool:
        return self.promotion.offer_pending

    def promotion_offer(self) -> PromotionOffer:
        return self.promotion.offer()

    @property
    def preview_visible(self) -> bool:
        return self.preview_view.is_visible

    def preview(self) -> list[CartLine]:
        return self.preview_view.entries()

    @property
    def checkout_open(self) -> bool:
        return self.checkout.is_open

    @property
    def last_validation_error(self) -> ValidationFailed | None:
        return self.checkout.last_error

    @property
    def confirmation_visible(self) -> bool:
        return self.confirmation.visible

    def nav_links(self) -> list[NavLink]:
        labels = (
            (NAV_LABEL_MENU, ROUTE_MENU),
            (NAV_LABEL_CART.format(count=self.item_count()), ROUTE_CART),
            (NAV_LABEL_GITHUB, ROUTE_GITHUB),
        )
        return [NavLink(label=label, route=route, current=route == self.route) for label, route in labels]

    def snapshot(self) -> SessionSnapshot:
        try:
            offer: PromotionOffer | None = self.promotion_offer()
        except NotAvailable:
            offer = None
        try:
            preview: tuple[CartLine, ...] | None = tuple(self.preview())
        except NotAvailable:
            preview = None
        total = self.total()
        return SessionSnapshot(
            route=self.route,
            nav_links=tuple(self.nav_links()),
            menu=tuple(self.menu()),
            lines=tuple(self.lines()),
            total=total,
            total_text=format_total(total),
            promotion_offer=offer,
            preview=preview,
            checkout_open=self.checkout_open,
            validation_error=self.last_validation_error,
            confirmation_visible=self.confirmation_visible,
        )
