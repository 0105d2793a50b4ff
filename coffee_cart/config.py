"""Runtime configuration defaults for the cart engine and storefront."""

from __future__ import annotations

import os
from decimal import Decimal

# Every third ordinary addition raises a promotion offer.
PROMOTION_THRESHOLD = 3
PROMOTION_ITEM_ID = "mocha"
PROMOTION_PRICE = Decimal("4.00")

CONFIRMATION_SECONDS = 3.0

_DEBUG_LOG_ENV = "COFFEE_CART_DEBUG_LOG"
DEBUG_LOG_PATH = os.environ.get(_DEBUG_LOG_ENV, "/tmp/coffee-cart-debug.log")

ROUTE_MENU = "/"
ROUTE_CART = "/cart"
ROUTE_GITHUB = "/github"
ROUTES = (ROUTE_MENU, ROUTE_CART, ROUTE_GITHUB)
