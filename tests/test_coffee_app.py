import pytest

from coffee_cart.checkout_modal import CheckoutModal
from coffee_cart.coffee_app import CoffeeCartApp
from coffee_cart.promo_modal import PromoModal
from coffee_cart.session import CartSession
from coffee_cart.timers import VirtualScheduler


def _app() -> CoffeeCartApp:
    return CoffeeCartApp(CartSession(scheduler=VirtualScheduler()))


@pytest.mark.asyncio
async def test_enter_adds_selected_coffee() -> None:
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.press("j", "enter")
        await pilot.pause()
        assert app.session.total_text() == "Total: $22.00"
        assert [link.label for link in app.session.nav_links()][1] == "cart (2)"


@pytest.mark.asyncio
async def test_third_coffee_opens_promo_and_accept_adds_discount() -> None:
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("enter", "enter", "enter")
        await pilot.pause()
        assert isinstance(app.screen, PromoModal)

        await pilot.press("y")
        await pilot.pause()
        assert not isinstance(app.screen, PromoModal)
        assert app.session.total_text() == "Total: $34.00"
        assert any(line.entry_id == "discounted-mocha" for line in app.session.lines())


@pytest.mark.asyncio
async def test_discarding_promo_keeps_total() -> None:
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("enter", "enter", "enter")
        await pilot.pause()
        await pilot.press("n")
        await pilot.pause()
        assert app.session.total_text() == "Total: $30.00"
        assert not app.session.promotion_visible


@pytest.mark.asyncio
async def test_preview_controls_adjust_selected_line() -> None:
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("enter", "p")
        await pilot.pause()
        assert app.session.preview_visible

        await pilot.press("plus")
        await pilot.pause()
        assert app.session.lines()[0].quantity == 2

        await pilot.press("minus", "minus")
        await pilot.pause()
        assert app.session.lines() == []
        assert not app.session.preview_visible


@pytest.mark.asyncio
async def test_cart_page_remove_deletes_whole_line() -> None:
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("enter", "j", "enter", "2")
        await pilot.pause()
        assert app.session.route == "/cart"

        await pilot.press("d")
        await pilot.pause()
        assert len(app.session.lines()) == 1


@pytest.mark.asyncio
async def test_checkout_modal_validates_then_completes() -> None:
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("enter", "o")
        await pilot.pause()
        modal = app.screen
        assert isinstance(modal, CheckoutModal)

        await pilot.press("enter")
        await pilot.pause()
        assert isinstance(app.screen, CheckoutModal)
        assert "Name is required." in modal.error

        await pilot.press("T", "o", "m")
        assert modal.name_value == "Tom"

        modal.email_value = "test@test.com"
        await pilot.press("enter")
        await pilot.pause()
        assert not isinstance(app.screen, CheckoutModal)
        assert app.session.total_text() == "Total: $0.00"
        assert app.session.confirmation_visible

        app.session.scheduler.advance(3)
        assert not app.session.confirmation_visible


@pytest.mark.asyncio
async def test_escape_closes_checkout_without_buying() -> None:
    app = _app()
    async with app.run_test() as pilot:
        await pilot.press("enter", "o")
        await pilot.pause()
        await pilot.press("escape")
        await pilot.pause()
        assert not app.session.checkout_open
        assert app.session.total_text() == "Total: $10.00"
