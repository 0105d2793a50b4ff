"""Promotion offer modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from coffee_cart.models import PromotionOffer


class PromoModal(ModalScreen[bool]):
    """Ask whether to take the discounted cup. Dismisses with True on accept."""

    BINDINGS = [
        ("y", "accept", "Yes, of course!"),
        ("n", "discard", "Nah, I'll skip."),
        ("escape", "discard", "Skip"),
    ]

    CSS = """
    PromoModal {
        align: center middle;
        background: $background 60%;
    }

    #promo-dialog {
        width: 60;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #promo-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #promo-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, offer: PromotionOffer) -> None:
        super().__init__()
        self.offer = offer

    def compose(self) -> ComposeResult:
        with Container(id="promo-dialog"):
            yield Static(self.offer.message, id="promo-title")
            yield Static("Y  Yes, of course!    N/Esc  Nah, I'll skip.", id="promo-help")

    def action_accept(self) -> None:
        self.dismiss(True)

    def action_discard(self) -> None:
        self.dismiss(False)
