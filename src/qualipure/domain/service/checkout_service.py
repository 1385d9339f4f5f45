"""Domain service: Checkout.

Turns the orderable part of a cart into a placed order. This spans two
aggregates (the customer's Cart and the shared Order Ledger), so it lives
in a service rather than on either of them.
"""

from __future__ import annotations

from qualipure.domain.ledger.order_ledger import OrderLedger
from qualipure.domain.model.cart import Cart
from qualipure.domain.model.order import Order, OrderLineItem
from qualipure.domain.service.id_generator import TimeIdGenerator


class CheckoutService:

    def __init__(self, order_ledger: OrderLedger, id_generator: TimeIdGenerator) -> None:
        self._order_ledger = order_ledger
        self._id_generator = id_generator

    def checkout(
        self,
        cart: Cart,
        customer_name: str,
        delivery_address: str | None,
    ) -> Order:
        """Place an order for every active cart line.

        Steps:
        1. Snapshot the active lines into OrderLineItems (independent copies).
        2. Let ``Order.create`` reject an empty cart or a missing address.
        3. Append to the ledger.
        4. Drop the ordered lines from the cart; zeroed lines stay.

        Nothing is changed if step 2 fails.
        """
        items = [OrderLineItem.from_cart_line(line) for line in cart.orderable_lines]

        order = Order.create(
            order_id=self._id_generator.next_id(),
            customer_name=customer_name,
            delivery_address=delivery_address,
            items=items,
            order_date=self._id_generator.clock(),
        )

        self._order_ledger.append(order)
        cart.clear_ordered_lines()
        return order
