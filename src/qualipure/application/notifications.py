"""Customer order notifications.

Listens to the Order Ledger and records one message per order each time
it reaches ON_DELIVERY or DELIVERED, starting from the orders already in
the ledger when the feed opens. Messages are kept in arrival order and
never repeated.
"""

from __future__ import annotations

from qualipure.domain.ledger.order_ledger import OrderLedger
from qualipure.domain.model.order import Order, OrderStatus

_MESSAGES = {
    OrderStatus.ON_DELIVERY: "Order {short_id} is now ON DELIVERY!",
    OrderStatus.DELIVERED: "Order {short_id} has been DELIVERED!",
}


class OrderNotificationFeed:

    def __init__(self, order_ledger: OrderLedger, customer_name: str | None = None) -> None:
        self._customer_name = customer_name
        self._messages: list[str] = []
        self._on_orders_changed(order_ledger.snapshot)
        self._unsubscribe = order_ledger.subscribe(self._on_orders_changed)

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    def close(self) -> None:
        self._unsubscribe()

    def _on_orders_changed(self, orders: tuple[Order, ...]) -> None:
        for order in orders:
            if self._customer_name is not None and order.customer_name != self._customer_name:
                continue
            template = _MESSAGES.get(order.status)
            if template is None:
                continue
            message = template.format(short_id=order.short_id)
            if message not in self._messages:
                self._messages.append(message)
