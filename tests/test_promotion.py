from decimal import Decimal

import pytest

from coffee_cart.cart import CartStore
from coffee_cart.errors import NoPendingOffer, NotAvailable
from coffee_cart.models import PromotionState
from coffee_cart.promotion import OfferStatus, PromotionEngine


def _engine(catalog) -> PromotionEngine:
    return PromotionEngine(CartStore(catalog))


def test_offer_raised_on_every_third_addition(small_catalog) -> None:
    engine = _engine(small_catalog)
    raised = []
    for _ in range(9):
        raised.append(engine.record_addition())
        if engine.offer_pending:
            engine.discard()
    assert raised == [False, False, True, False, False, True, False, False, True]


def test_state_starts_idle(small_catalog) -> None:
    engine = _engine(small_catalog)
    assert engine.state == PromotionState(0, False)
    assert engine.status is OfferStatus.IDLE
    with pytest.raises(NotAvailable):
        engine.offer()


def test_accept_adds_one_discount_entry_at_fixed_price(small_catalog) -> None:
    engine = _engine(small_catalog)
    for _ in range(3):
        engine.record_addition()

    offer = engine.offer()
    assert offer.message == "It's your lucky day! Get an extra cup of Mocha for $4."

    entry = engine.accept()
    assert entry.fixed_price == Decimal("4.00")
    assert entry.quantity == 1
    assert engine.cart.entries() == (entry,)
    assert engine.status is OfferStatus.IDLE


def test_discard_has_no_cart_side_effect(small_catalog) -> None:
    engine = _engine(small_catalog)
    for _ in range(3):
        engine.record_addition()
    engine.discard()
    assert engine.cart.is_empty()
    assert not engine.offer_pending


def test_resolve_without_offer_fails(small_catalog) -> None:
    engine = _engine(small_catalog)
    with pytest.raises(NoPendingOffer):
        engine.accept()
    with pytest.raises(NoPendingOffer):
        engine.discard()


def test_unanswered_offer_lapses_on_next_addition(small_catalog) -> None:
    engine = _engine(small_catalog)
    for _ in range(3):
        engine.record_addition()
    assert engine.offer_pending

    assert not engine.record_addition()
    assert engine.state == PromotionState(4, False)
    assert engine.cart.is_empty()
    with pytest.raises(NoPendingOffer):
        engine.accept()

    assert not engine.record_addition()
    assert engine.record_addition()
    assert engine.state == PromotionState(6, True)


def test_every_addition_offers_with_threshold_of_one(small_catalog) -> None:
    engine = PromotionEngine(CartStore(small_catalog), threshold=1)
    assert engine.record_addition()
    assert not engine.record_addition()
    assert engine.state == PromotionState(2, True)


def test_float_promotion_price_is_rejected(small_catalog) -> None:
    with pytest.raises(TypeError):
        PromotionEngine(CartStore(small_catalog), price=4.0)


def test_reset_restarts_counter(small_catalog) -> None:
    engine = _engine(small_catalog)
    for _ in range(4):
        engine.record_addition()
    engine.reset()
    assert engine.state == PromotionState(0, False)
    engine.record_addition()
    engine.record_addition()
    assert engine.record_addition()
