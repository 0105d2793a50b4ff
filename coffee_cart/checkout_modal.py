"""Checkout details modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from coffee_cart.errors import ValidationFailed
from coffee_cart.models import BuyerInput, CompletedOrder
from coffee_cart.session import CartSession


class CheckoutModal(ModalScreen[CompletedOrder | None]):
    """Collect buyer name and email, then submit through the session."""

    CSS = """
    CheckoutModal {
        align: center middle;
        background: $background 60%;
    }

    #checkout-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #checkout-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #checkout-body {
        color: white;
        margin-bottom: 1;
    }

    #checkout-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #checkout-help {
        color: #dddddd;
    }
    """

    _NAME_FIELD = "name"
    _EMAIL_FIELD = "email"
    _PROMO_FIELD = "promotional_emails"
    FIELDS = (_NAME_FIELD, _EMAIL_FIELD, _PROMO_FIELD)

    def __init__(self, session: CartSession) -> None:
        super().__init__()
        self.session = session
        self.name_value = ""
        self.email_value = ""
        self.wants_promotional_emails = False
        self.field_index = 0
        self.error = ""

    @property
    def current_field(self) -> str:
        return self.FIELDS[self.field_index]

    def compose(self) -> ComposeResult:
        with Container(id="checkout-dialog"):
            yield Static("Payment details", id="checkout-title")
            yield Static(id="checkout-body")
            yield Static(id="checkout-error")
            yield Static(
                "Tab/↑/↓ switch field. Space toggles the checkbox. Enter submit. Esc close.",
                id="checkout-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.session.close_checkout()
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._submit()
            event.stop()
            return

        if event.key in {"tab", "down"}:
            self.field_index = (self.field_index + 1) % len(self.FIELDS)
            self._refresh_content()
            event.stop()
            return

        if event.key in {"shift+tab", "up"}:
            self.field_index = (self.field_index - 1) % len(self.FIELDS)
            self._refresh_content()
            event.stop()
            return

        if self.current_field == self._PROMO_FIELD:
            if event.key == "space":
                self.wants_promotional_emails = not self.wants_promotional_emails
                self._refresh_content()
            event.stop()
            return

        if event.key == "backspace":
            self._set_current_value(self._current_value()[:-1])
            self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self._set_current_value(self._current_value() + event.character)
            self._refresh_content()
            event.stop()
            return

        # Ignore all non-text keys while the form is open.
        event.stop()

    def buyer_input(self) -> BuyerInput:
        return BuyerInput(
            name=self.name_value,
            email=self.email_value,
            wants_promotional_emails=self.wants_promotional_emails,
        )

    def _submit(self) -> None:
        try:
            order = self.session.submit_checkout(self.buyer_input())
        except ValidationFailed as exc:
            problems = []
            if exc.missing_name:
                problems.append("Name is required.")
            if exc.invalid_email:
                problems.append("Enter a valid email address.")
            self.error = " ".join(problems)
            self._refresh_content()
            return
        self.dismiss(order)

    def _current_value(self) -> str:
        if self.current_field == self._NAME_FIELD:
            return self.name_value
        return self.email_value

    def _set_current_value(self, value: str) -> None:
        if self.current_field == self._NAME_FIELD:
            self.name_value = value
        else:
            self.email_value = value

    def _refresh_content(self) -> None:
        body = self.query_one("#checkout-body", Static)
        error_widget = self.query_one("#checkout-error", Static)

        content = Text(style="white")
        rows = (
            (self._NAME_FIELD, f"Name: {self.name_value}"),
            (self._EMAIL_FIELD, f"Email: {self.email_value}"),
            (
                self._PROMO_FIELD,
                f"[{'x' if self.wants_promotional_emails else ' '}] I would like to receive order updates and promotional messages.",
            ),
        )
        for idx, (field_name, label) in enumerate(rows):
            if idx > 0:
                content.append("\n")
            selected = field_name == self.current_field
            pointer = "➤ " if selected else "  "
            cursor = "|" if selected and field_name != self._PROMO_FIELD else ""
            content.append(f"{pointer}{label}{cursor}", style="bold white" if selected else "white")

        body.update(content)
        error_widget.update(self.error or "")
