"""Integration tests for the admin and customer order lifecycle use cases."""

import pytest

from qualipure.application.advance_order import AdvanceOrderHandler
from qualipure.application.archive_order import ArchiveOrderHandler
from qualipure.application.cancel_order import CancelOrderHandler
from qualipure.application.delete_order import DeleteOrderHandler
from qualipure.application.list_orders import ListOrdersHandler
from qualipure.application.place_order import PlaceOrderHandler
from qualipure.application.purge_order import PurgeOrderHandler
from qualipure.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    InvalidTransitionError,
    ValidationError,
)
from qualipure.domain.ledger.order_ledger import OrderLedger
from qualipure.domain.model.cart import Cart
from qualipure.domain.model.order import OrderStatus
from qualipure.domain.model.session import Role, Session
from qualipure.domain.service.checkout_service import CheckoutService
from qualipure.domain.service.id_generator import TimeIdGenerator
from tests.fakes import FakeClock, slim_gallon

CUSTOMER = Session("Zyrus Jake", Role.CUSTOMER)
OTHER_CUSTOMER = Session("Someone Else", Role.CUSTOMER)
ADMIN = Session("admin", Role.ADMIN)


def _setup() -> tuple[OrderLedger, str]:
    """Ledger holding one pending p1 x2 order; returns it with the order id."""
    ledger = OrderLedger()
    cart = Cart()
    cart.add_product(slim_gallon())
    cart.add_product(slim_gallon())
    order = CheckoutService(ledger, TimeIdGenerator(FakeClock())).checkout(
        cart, CUSTOMER.username, "Addr1"
    )
    return ledger, order.id


class TestAdvanceOrder:

    def test_advance_follows_next_step(self):
        ledger, order_id = _setup()
        handler = AdvanceOrderHandler(ledger)

        statuses = [handler.handle(ADMIN, order_id).status for _ in range(3)]

        assert statuses == ["PREPARING", "ON_DELIVERY", "DELIVERED"]

    def test_advance_delivered_order_rejected(self):
        ledger, order_id = _setup()
        ledger.update_status(order_id, OrderStatus.DELIVERED)
        with pytest.raises(InvalidTransitionError, match="already DELIVERED"):
            AdvanceOrderHandler(ledger).handle(ADMIN, order_id)

    def test_explicit_target_can_skip_ahead(self):
        ledger, order_id = _setup()
        handler = AdvanceOrderHandler(ledger)
        handler.handle(ADMIN, order_id, OrderStatus.PREPARING)
        dto = handler.handle(ADMIN, order_id, OrderStatus.DELIVERED)
        assert dto.status == "DELIVERED"

    def test_explicit_backward_target_rejected(self):
        ledger, order_id = _setup()
        handler = AdvanceOrderHandler(ledger)
        handler.handle(ADMIN, order_id, OrderStatus.ON_DELIVERY)
        with pytest.raises(InvalidTransitionError):
            handler.handle(ADMIN, order_id, OrderStatus.PREPARING)
        assert ledger.get_by_id(order_id).status == OrderStatus.ON_DELIVERY

    def test_admin_cannot_cancel(self):
        ledger, order_id = _setup()
        with pytest.raises(AccessDeniedError, match="customer"):
            AdvanceOrderHandler(ledger).handle(ADMIN, order_id, OrderStatus.CANCELLED)

    def test_customer_cannot_advance(self):
        ledger, order_id = _setup()
        with pytest.raises(AccessDeniedError):
            AdvanceOrderHandler(ledger).handle(CUSTOMER, order_id)

    def test_unknown_order_is_noop(self):
        ledger, _ = _setup()
        assert AdvanceOrderHandler(ledger).handle(ADMIN, "404") is None


class TestCancelOrder:

    def test_cancel_pending_order(self):
        ledger, order_id = _setup()
        dto = CancelOrderHandler(ledger).handle(CUSTOMER, order_id)
        assert dto.status == "CANCELLED"
        assert dto.next_status is None

    def test_cancel_after_preparing_rejected(self):
        ledger, order_id = _setup()
        AdvanceOrderHandler(ledger).handle(ADMIN, order_id)
        with pytest.raises(InvalidTransitionError):
            CancelOrderHandler(ledger).handle(CUSTOMER, order_id)

    def test_cannot_cancel_someone_elses_order(self):
        ledger, order_id = _setup()
        with pytest.raises(AccessDeniedError, match="another customer"):
            CancelOrderHandler(ledger).handle(OTHER_CUSTOMER, order_id)

    def test_admin_session_cannot_reach_cancel(self):
        ledger, order_id = _setup()
        with pytest.raises(AccessDeniedError):
            CancelOrderHandler(ledger).handle(ADMIN, order_id)


class TestArchiveOrder:

    def test_archive_after_delivery(self):
        ledger, order_id = _setup()
        advance = AdvanceOrderHandler(ledger)
        advance.handle(ADMIN, order_id, OrderStatus.PREPARING)
        advance.handle(ADMIN, order_id, OrderStatus.DELIVERED)

        dto = ArchiveOrderHandler(ledger).handle(ADMIN, order_id)

        listing = ListOrdersHandler(ledger)
        assert dto.admin_archived
        assert listing.admin_live_orders(ADMIN) == []
        assert [o.id for o in listing.admin_archived_orders(ADMIN)] == [order_id]

    def test_archive_pending_rejected(self):
        ledger, order_id = _setup()
        with pytest.raises(ValidationError, match="Cannot archive"):
            ArchiveOrderHandler(ledger).handle(ADMIN, order_id)

    def test_customer_cannot_archive(self):
        ledger, order_id = _setup()
        CancelOrderHandler(ledger).handle(CUSTOMER, order_id)
        with pytest.raises(AccessDeniedError):
            ArchiveOrderHandler(ledger).handle(CUSTOMER, order_id)


class TestDeleteOrder:

    def test_soft_delete_hides_from_customer_only(self):
        ledger, order_id = _setup()

        DeleteOrderHandler(ledger).handle(CUSTOMER, order_id)

        listing = ListOrdersHandler(ledger)
        assert listing.customer_orders(CUSTOMER) == []
        live = listing.admin_live_orders(ADMIN)
        assert [o.id for o in live] == [order_id]
        assert live[0].status == "PENDING"
        assert live[0].customer_deleted

    def test_admin_cannot_soft_delete(self):
        ledger, order_id = _setup()
        with pytest.raises(AccessDeniedError):
            DeleteOrderHandler(ledger).handle(ADMIN, order_id)

    def test_unknown_order_is_noop(self):
        ledger, _ = _setup()
        assert DeleteOrderHandler(ledger).handle(CUSTOMER, "404") is None


class TestPurgeOrder:

    def test_purge_removes_for_everyone(self):
        ledger, order_id = _setup()

        dto = PurgeOrderHandler(ledger).handle(ADMIN, order_id)

        assert dto.id == order_id
        assert len(ledger) == 0

    def test_purge_unknown_is_noop(self):
        ledger, _ = _setup()
        assert PurgeOrderHandler(ledger).handle(ADMIN, "404") is None
        assert len(ledger) == 1

    def test_customer_cannot_purge(self):
        ledger, order_id = _setup()
        with pytest.raises(AccessDeniedError):
            PurgeOrderHandler(ledger).handle(CUSTOMER, order_id)


class TestShowOrder:

    def test_customer_sees_own_order(self):
        ledger, order_id = _setup()
        assert ListOrdersHandler(ledger).show(CUSTOMER, order_id).id == order_id

    def test_customer_cannot_see_deleted_or_foreign_orders(self):
        ledger, order_id = _setup()
        listing = ListOrdersHandler(ledger)
        with pytest.raises(EntityNotFoundError):
            listing.show(OTHER_CUSTOMER, order_id)
        DeleteOrderHandler(ledger).handle(CUSTOMER, order_id)
        with pytest.raises(EntityNotFoundError):
            listing.show(CUSTOMER, order_id)

    def test_admin_sees_deleted_order(self):
        ledger, order_id = _setup()
        DeleteOrderHandler(ledger).handle(CUSTOMER, order_id)
        assert ListOrdersHandler(ledger).show(ADMIN, order_id).customer_deleted


class TestPaddedUsername:
    """A configured username with surrounding spaces still owns its orders."""

    PADDED = Session(" Zyrus Jake ", Role.CUSTOMER)

    def _place(self) -> tuple[OrderLedger, str]:
        ledger = OrderLedger()
        cart = Cart()
        cart.add_product(slim_gallon())
        dto = PlaceOrderHandler(ledger, TimeIdGenerator(FakeClock())).handle(
            self.PADDED, cart, "Addr1"
        )
        return ledger, dto.id

    def test_order_listed_for_its_customer(self):
        ledger, order_id = self._place()
        listing = ListOrdersHandler(ledger)
        assert [o.id for o in listing.customer_orders(self.PADDED)] == [order_id]
        assert listing.show(self.PADDED, order_id).customer_name == " Zyrus Jake "

    def test_customer_can_cancel(self):
        ledger, order_id = self._place()
        assert CancelOrderHandler(ledger).handle(self.PADDED, order_id).status == "CANCELLED"

    def test_customer_can_delete(self):
        ledger, order_id = self._place()
        DeleteOrderHandler(ledger).handle(self.PADDED, order_id)
        assert ListOrdersHandler(ledger).customer_orders(self.PADDED) == []

    def test_trimmed_name_is_a_different_customer(self):
        ledger, order_id = self._place()
        with pytest.raises(AccessDeniedError):
            CancelOrderHandler(ledger).handle(CUSTOMER, order_id)
