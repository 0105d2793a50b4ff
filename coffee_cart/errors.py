"""Recoverable errors raised by the cart engine."""

from __future__ import annotations


class CartError(Exception):
    """Base class for rejected storefront events."""


class UnknownItem(CartError):
    def __init__(self, item_id: str) -> None:
        super().__init__(f"Unknown menu item: {item_id!r}")
        self.item_id = item_id


class EntryNotFound(CartError):
    def __init__(self, entry_id: str) -> None:
        super().__init__(f"No cart entry: {entry_id!r}")
        self.entry_id = entry_id


class IncrementNotAllowed(CartError):
    """Raised when adding to a line that only supports removal."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Cart entry {entry_id!r} cannot be incremented")
        self.entry_id = entry_id


class NoPendingOffer(CartError):
    def __init__(self) -> None:
        super().__init__("No promotion offer is pending")


class NotAvailable(CartError):
    """Raised when querying a view that is not currently shown."""

    def __init__(self, view: str) -> None:
        super().__init__(f"{view} is not available")
        self.view = view


class UnknownRoute(CartError):
    def __init__(self, route: str) -> None:
        super().__init__(f"Unknown route: {route!r}")
        self.route = route


class ValidationFailed(CartError):
    """Checkout input was rejected; the flags name the fields at fault."""

    def __init__(self, *, missing_name: bool, invalid_email: bool) -> None:
        problems = []
        if missing_name:
            problems.append("name is required")
        if invalid_email:
            problems.append("email is invalid")
        super().__init__("Checkout rejected: " + ", ".join(problems))
        self.missing_name = missing_name
        self.invalid_email = invalid_email
