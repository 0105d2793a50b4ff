"""Main Textual app class."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.events import Click, Enter, Leave
from textual.timer import Timer
from textual.widgets import Header, Static

from coffee_cart.checkout_modal import CheckoutModal
from coffee_cart.config import ROUTE_CART, ROUTE_GITHUB, ROUTE_MENU
from coffee_cart.constant import EMPTY_CART_MESSAGE
from coffee_cart.debug_log import log_debug
from coffee_cart.errors import CartError, NotAvailable
from coffee_cart.models import CartLine, CompletedOrder
from coffee_cart.promo_modal import PromoModal
from coffee_cart.rendering import (
    format_cart_line,
    format_list_header,
    format_menu_line,
    format_nav,
    format_preview_line,
)
from coffee_cart.session import CartSession


class TextualTimerHandle:
    def __init__(self, timer: Timer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        self._timer.stop()


class TextualScheduler:
    """Runs session timers on the app's event loop and refreshes the screen after each one fires."""

    def __init__(self, app: App, on_fire: Callable[[], None]) -> None:
        self.app = app
        self.on_fire = on_fire

    def call_later(self, delay: float, callback: Callable[[], None]) -> TextualTimerHandle:
        def fire() -> None:
            callback()
            self.on_fire()

        return TextualTimerHandle(self.app.set_timer(delay, fire))


class PayButton(Static):
    """The total button. Hovering shows the cart preview, clicking opens checkout."""

    def __init__(self, on_hover: Callable[[bool], None], on_press: Callable[[], None], **kwargs) -> None:
        super().__init__(**kwargs)
        self.hover_callback = on_hover
        self.press_callback = on_press

    def on_enter(self, event: Enter) -> None:
        self.hover_callback(True)

    def on_leave(self, event: Leave) -> None:
        self.hover_callback(False)

    def on_click(self, event: Click) -> None:
        self.press_callback()


class CoffeeCartApp(App):
    """A Textual storefront for ordering coffee."""

    TITLE = "Coffee Cart"
    SUB_TITLE = "Menu / Cart"

    CSS = """
    Screen {
        layout: vertical;
    }

    #nav {
        height: 1;
        padding: 0 1;
    }

    #page {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    #pay {
        height: 3;
        border: heavy $secondary;
        padding: 0 1;
        text-style: bold;
    }

    #preview {
        height: auto;
        border: tall $surface;
        padding: 0 1;
    }

    #status {
        height: 1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("1", "navigate('/')", "Menu"),
        ("2", "navigate('/cart')", "Cart"),
        ("3", "navigate('/github')", "GitHub"),
        ("j", "move_selection(1)", "Next"),
        ("down", "move_selection(1)", "Next"),
        ("k", "move_selection(-1)", "Previous"),
        ("up", "move_selection(-1)", "Previous"),
        ("enter", "activate_selected", "Add to cart"),
        ("l", "toggle_language", "Toggle name"),
        ("plus", "increment_selected", "Add one"),
        ("minus", "decrement_selected", "Remove one"),
        ("d", "remove_selected", "Remove line"),
        ("p", "toggle_pay_focus", "Preview"),
        ("o", "open_checkout", "Checkout"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: CartSession | None = None) -> None:
        super().__init__()
        self.session = session or CartSession(scheduler=TextualScheduler(self, self._refresh_all))
        self.menu_index = 0
        self.line_index = 0
        self.system_status = ""
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="nav")
        with Vertical():
            yield Static(id="page")
            yield PayButton(on_hover=self._set_pay_focus, on_press=self.action_open_checkout, id="pay")
            yield Static(id="preview")
            yield Static(id="status")

    def on_mount(self) -> None:
        log_debug("on_mount", route=self.session.route)
        self._refresh_all()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, (PromoModal, CheckoutModal))

    def _apply(self, event: str, func: Callable[[], object]) -> bool:
        """Run one session event, turning rejections into a status message."""
        try:
            func()
        except CartError as exc:
            self.system_status = str(exc)
            log_debug(f"app_{event}_rejected", error=str(exc))
            self._refresh_all()
            return False
        self.system_status = ""
        self._refresh_all()
        return True

    def action_navigate(self, route: str) -> None:
        if self._modal_open():
            return
        if self._apply("navigate", lambda: self.session.navigate_to(route)):
            self.line_index = 0

    def action_move_selection(self, delta: int) -> None:
        if self._modal_open():
            return

        lines = self._active_lines()
        if lines:
            self.line_index = (self.line_index + delta) % len(lines)
        elif self.session.route == ROUTE_MENU:
            self.menu_index = (self.menu_index + delta) % len(self.session.catalog)
        self._refresh_all()

    def action_activate_selected(self) -> None:
        if self._modal_open():
            return
        if self.session.route != ROUTE_MENU:
            return

        item = self.session.catalog.items()[self.menu_index]
        if self._apply("activate", lambda: self.session.activate_item(item.item_id)):
            self._maybe_offer_promotion()

    def action_toggle_language(self) -> None:
        if self._modal_open():
            return
        if self.session.route != ROUTE_MENU:
            return

        item = self.session.catalog.items()[self.menu_index]
        self._apply("toggle_language", lambda: self.session.toggle_item_language(item.item_id))

    def action_increment_selected(self) -> None:
        if self._modal_open():
            return
        line = self._selected_line()
        if line is None:
            return
        if self._apply("increment", lambda: self.session.increment_entry(line.entry_id)):
            self._maybe_offer_promotion()

    def action_decrement_selected(self) -> None:
        if self._modal_open():
            return
        line = self._selected_line()
        if line is None:
            return
        self._apply("decrement", lambda: self.session.decrement_entry(line.entry_id))

    def action_remove_selected(self) -> None:
        if self._modal_open():
            return
        line = self._selected_line()
        if line is None:
            return
        self._apply("remove", lambda: self.session.remove_entry(line.entry_id))

    def action_toggle_pay_focus(self) -> None:
        if self._modal_open():
            return
        self._set_pay_focus(not self.session.preview_view.focused)

    def action_open_checkout(self) -> None:
        if self._modal_open():
            return
        if not self._apply("open_checkout", self.session.open_checkout):
            return
        self.push_screen(CheckoutModal(self.session), self._on_checkout_closed)

    def _set_pay_focus(self, focused: bool) -> None:
        if self._modal_open():
            return
        self.session.set_pay_focus(focused)
        self.line_index = 0
        self._refresh_all()

    def _maybe_offer_promotion(self) -> None:
        try:
            offer = self.session.promotion_offer()
        except NotAvailable:
            return
        log_debug("promo_shown", item_id=offer.item_id)
        self.push_screen(PromoModal(offer), self._on_promo_closed)

    def _on_promo_closed(self, accepted: bool | None) -> None:
        if accepted:
            self._apply("accept_promotion", self.session.accept_promotion)
        else:
            self._apply("discard_promotion", self.session.discard_promotion)

    def _on_checkout_closed(self, order: CompletedOrder | None) -> None:
        if order is None:
            log_debug("checkout_cancelled")
        else:
            log_debug("checkout_completed", total=str(order.total), lines=len(order.lines))
        self.line_index = 0
        self._refresh_all()

    def _active_lines(self) -> list[CartLine]:
        """Lines the +/- controls act on: the cart page list, or the preview while it is shown."""
        if self.session.route == ROUTE_CART:
            return self.session.lines()
        if self.session.preview_visible:
            return self.session.preview()
        return []

    def _selected_line(self) -> CartLine | None:
        lines = self._active_lines()
        if not lines:
            return None
        if self.line_index >= len(lines):
            self.line_index = len(lines) - 1
        return lines[self.line_index]

    def _refresh_all(self) -> None:
        try:
            nav = self.query_one("#nav", Static)
            page = self.query_one("#page", Static)
            pay = self.query_one("#pay", PayButton)
            preview = self.query_one("#preview", Static)
            status = self.query_one("#status", Static)
        except NoMatches:
            return

        nav.update(format_nav(self.session.nav_links()))
        page.update(self._render_page())
        pay.update(self.session.total_text())
        preview.update(self._render_preview())
        preview.display = self.session.preview_visible

        if self.session.confirmation_visible:
            status.update(Text(self.session.confirmation.message, style="bold #5fbf72"))
        else:
            status.update(self.system_status)

    def _render_page(self) -> Text:
        if self.session.route == ROUTE_GITHUB:
            return Text("Source code and issues live on GitHub.")
        if self.session.route == ROUTE_CART:
            return self._render_cart_page()
        return self._render_menu_page()

    def _render_menu_page(self) -> Text:
        lines = Text()
        for idx, menu_line in enumerate(self.session.menu()):
            if idx > 0:
                lines.append("\n")
            pointer = "➤ " if idx == self.menu_index else "  "
            lines.append(pointer)
            lines.append_text(format_menu_line(menu_line))
        return lines

    def _render_cart_page(self) -> Text:
        cart_lines = self.session.lines()
        if not cart_lines:
            return Text(EMPTY_CART_MESSAGE)

        if self.line_index >= len(cart_lines):
            self.line_index = len(cart_lines) - 1

        lines = format_list_header()
        for idx, cart_line in enumerate(cart_lines):
            lines.append("\n")
            pointer = "➤ " if idx == self.line_index else "  "
            lines.append(pointer)
            lines.append_text(format_cart_line(cart_line))
        return lines

    def _render_preview(self) -> Text:
        try:
            preview_lines = self.session.preview()
        except NotAvailable:
            return Text()

        if self.line_index >= len(preview_lines):
            self.line_index = len(preview_lines) - 1

        lines = Text()
        for idx, preview_line in enumerate(preview_lines):
            if idx > 0:
                lines.append("\n")
            pointer = "➤ " if idx == self.line_index else "  "
            lines.append(pointer)
            lines.append_text(format_preview_line(preview_line))
        return lines
