"""Application service: Place Order use case.

Delegates the cart-to-order snapshot to the checkout domain service and
returns a DTO of the new order.
"""

from __future__ import annotations

import logging

from qualipure.application.dto import OrderDTO, order_to_dto
from qualipure.domain.ledger.order_ledger import OrderLedger
from qualipure.domain.model.cart import Cart
from qualipure.domain.model.session import Role, Session
from qualipure.domain.service.checkout_service import CheckoutService
from qualipure.domain.service.id_generator import TimeIdGenerator

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, order_ledger: OrderLedger, id_generator: TimeIdGenerator) -> None:
        self._checkout = CheckoutService(order_ledger, id_generator)

    def handle(self, session: Session, cart: Cart, delivery_address: str | None) -> OrderDTO:
        session.require(Role.CUSTOMER)
        order = self._checkout.checkout(
            cart,
            customer_name=session.username,
            delivery_address=delivery_address,
        )
        logger.info(
            "Order %s placed by %s for %s", order.id, order.customer_name, order.total_amount
        )
        return order_to_dto(order)
