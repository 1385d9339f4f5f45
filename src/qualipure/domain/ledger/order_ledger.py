"""Order Ledger — the single owner of every placed order.

Views never touch the backing sequence; they read ``snapshot`` (or one
of the filtered projections) and call the command methods below.

Commands that address an order by id treat an unknown id as a no-op and
return ``None``. With one writer at a time a missing id can only mean a
stale screen, not a conflict worth reporting.
"""

from __future__ import annotations

import logging
from typing import Callable

from qualipure.domain.exceptions import ValidationError
from qualipure.domain.ledger.observable import ObservableLedger
from qualipure.domain.model.order import Order, OrderStatus

logger = logging.getLogger(__name__)


class OrderLedger(ObservableLedger[Order]):

    # --- Commands -------------------------------------------------------------

    def append(self, order: Order) -> None:
        if self.get_by_id(order.id) is not None:
            raise ValidationError(f"Order {order.id} is already in the ledger")
        self._publish(self._items + (order,))
        logger.debug("Order %s appended (status=%s)", order.id, order.status.value)

    def update_status(self, order_id: str, new_status: OrderStatus) -> Order | None:
        """Move an order to *new_status*.

        Raises InvalidTransitionError, leaving the ledger unchanged, if the
        order's current status cannot reach *new_status*.
        """
        return self._replace(order_id, lambda order: order.with_status(new_status))

    def archive_for_admin(self, order_id: str) -> Order | None:
        return self._replace(order_id, Order.archived_for_admin)

    def mark_deleted_by_customer(self, order_id: str) -> Order | None:
        return self._replace(order_id, Order.deleted_by_customer)

    def remove_order(self, order_id: str) -> Order | None:
        """Physically delete an order. Unlike the two flags this is permanent."""
        index = self._index_of(order_id)
        if index is None:
            logger.debug("remove_order: no order %s; ignoring", order_id)
            return None
        removed = self._items[index]
        self._publish(self._items[:index] + self._items[index + 1:])
        logger.debug("Order %s removed", order_id)
        return removed

    # --- Queries --------------------------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        index = self._index_of(order_id)
        return None if index is None else self._items[index]

    def customer_orders(self, customer_name: str | None = None) -> list[Order]:
        """Orders the customer has not deleted, optionally only their own."""
        return [
            order
            for order in self._items
            if not order.customer_deleted
            and (customer_name is None or order.customer_name == customer_name)
        ]

    def admin_live_orders(self) -> list[Order]:
        return [order for order in self._items if not order.admin_archived]

    def admin_archived_orders(self) -> list[Order]:
        return [order for order in self._items if order.admin_archived]

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, order_id: str) -> int | None:
        for i, order in enumerate(self._items):
            if order.id == order_id:
                return i
        return None

    def _replace(
        self, order_id: str, change: Callable[[Order], Order]
    ) -> Order | None:
        index = self._index_of(order_id)
        if index is None:
            logger.debug("No order %s in the ledger; ignoring", order_id)
            return None

        # Build the replacement first so a rejected change leaves no trace.
        updated = change(self._items[index])
        self._publish(self._items[:index] + (updated,) + self._items[index + 1:])
        logger.debug(
            "Order %s updated (status=%s, archived=%s, deleted=%s)",
            order_id,
            updated.status.value,
            updated.admin_archived,
            updated.customer_deleted,
        )
        return updated
