"""Integration tests for the cart and Place Order use cases.

Uses in-memory fakes — no environment, no clock.
"""

import pytest

from qualipure.application.manage_cart import ManageCartHandler
from qualipure.application.place_order import PlaceOrderHandler
from qualipure.domain.exceptions import AccessDeniedError, EntityNotFoundError, ValidationError
from qualipure.domain.ledger.order_ledger import OrderLedger
from qualipure.domain.model.cart import Cart
from qualipure.domain.model.session import Role, Session
from qualipure.domain.service.id_generator import TimeIdGenerator
from tests.fakes import FakeClock, FakeProductRepository, slim_gallon, slim_refill

CUSTOMER = Session("Zyrus Jake", Role.CUSTOMER)
ADMIN = Session("admin", Role.ADMIN)


def _setup():
    cart = Cart()
    ledger = OrderLedger()
    cart_handler = ManageCartHandler(FakeProductRepository([slim_gallon(), slim_refill()]), cart)
    place = PlaceOrderHandler(ledger, TimeIdGenerator(FakeClock()))
    return cart, ledger, cart_handler, place


class TestManageCart:

    def test_add_twice_shows_aggregated_line(self):
        _, _, cart_handler, _ = _setup()
        cart_handler.add(CUSTOMER, "p1")
        dto = cart_handler.add(CUSTOMER, "p1")

        assert len(dto.lines) == 1
        assert dto.lines[0].quantity == 2
        assert dto.lines[0].line_total == "₱400.00"
        assert dto.item_count == 1
        assert dto.total == "₱400.00"

    def test_zeroed_line_is_shown_inactive(self):
        _, _, cart_handler, _ = _setup()
        cart_handler.add(CUSTOMER, "p1")
        dto = cart_handler.decrement(CUSTOMER, "p1")

        assert dto.lines[0].quantity == 0
        assert not dto.lines[0].active
        assert dto.item_count == 0
        assert dto.total == "₱0.00"

        dto = cart_handler.increment(CUSTOMER, "p1")
        assert dto.total == "₱200.00"

    def test_remove_line(self):
        _, _, cart_handler, _ = _setup()
        cart_handler.add(CUSTOMER, "p2")
        dto = cart_handler.remove(CUSTOMER, "p2")
        assert dto.lines == []

    def test_unknown_product_rejected(self):
        _, _, cart_handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            cart_handler.add(CUSTOMER, "p9")

    def test_admin_cannot_shop(self):
        _, _, cart_handler, _ = _setup()
        with pytest.raises(AccessDeniedError):
            cart_handler.add(ADMIN, "p1")


class TestPlaceOrder:

    def test_checkout_scenario(self):
        cart, ledger, cart_handler, place = _setup()
        cart_handler.add(CUSTOMER, "p1")
        cart_handler.add(CUSTOMER, "p1")

        dto = place.handle(CUSTOMER, cart, "Addr1")

        assert dto.status == "PENDING"
        assert dto.total == "₱400.00"
        assert dto.customer_name == "Zyrus Jake"
        assert dto.delivery_address == "Addr1"
        assert [(i.product_name, i.quantity, i.line_total) for i in dto.items] == [
            ("Water with Slim Gallon", 2, "₱400.00")
        ]
        assert dto.next_status == "PREPARING"
        assert "p1" not in cart
        assert ledger.get_by_id(dto.id) is not None

    def test_empty_cart_rejected(self):
        cart, ledger, _, place = _setup()
        with pytest.raises(ValidationError, match="cart is empty"):
            place.handle(CUSTOMER, cart, "Addr1")
        assert len(ledger) == 0

    def test_missing_address_rejected(self):
        cart, ledger, cart_handler, place = _setup()
        cart_handler.add(CUSTOMER, "p1")
        with pytest.raises(ValidationError, match="delivery address"):
            place.handle(CUSTOMER, cart, None)
        assert len(ledger) == 0
        assert cart.get_line("p1").quantity == 1

    def test_admin_cannot_check_out(self):
        cart, _, _, place = _setup()
        cart.add_product(slim_gallon())
        with pytest.raises(AccessDeniedError):
            place.handle(ADMIN, cart, "Addr1")
