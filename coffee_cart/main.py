"""Entry point for the coffee-cart Textual app."""

from __future__ import annotations

from coffee_cart.coffee_app import CoffeeCartApp


def main() -> None:
    """Run the Textual application."""
    CoffeeCartApp().run()


if __name__ == "__main__":
    main()
