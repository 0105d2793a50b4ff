from decimal import Decimal

import pytest

from coffee_cart import config
from coffee_cart.catalog import MenuCatalog
from coffee_cart.models import MenuItem
from coffee_cart.session import CartSession
from coffee_cart.timers import VirtualScheduler


@pytest.fixture(autouse=True)
def debug_log_in_tmp(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setattr(config, "DEBUG_LOG_PATH", str(path))
    return path


@pytest.fixture
def small_catalog() -> MenuCatalog:
    return MenuCatalog(
        [
            MenuItem("a", "Latte", "拿铁", Decimal("1.00")),
            MenuItem("b", "Flat White", "平白咖啡", Decimal("2.00")),
            MenuItem("mocha", "Mocha", "摩卡", Decimal("8.00")),
        ]
    )


@pytest.fixture
def scheduler() -> VirtualScheduler:
    return VirtualScheduler()


@pytest.fixture
def session(scheduler) -> CartSession:
    return CartSession(scheduler=scheduler)


@pytest.fixture
def small_session(small_catalog, scheduler) -> CartSession:
    return CartSession(small_catalog, scheduler)
