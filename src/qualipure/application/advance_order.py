"""Application service: Advance Order use case (admin).

The admin screen offers one action per order, the next fulfillment step.
Passing an explicit target is allowed for skipping ahead, but the Order
aggregate still decides whether the move is legal.
"""

from __future__ import annotations

from qualipure.application.dto import OrderDTO, order_to_dto
from qualipure.domain.exceptions import AccessDeniedError, InvalidTransitionError
from qualipure.domain.ledger.order_ledger import OrderLedger
from qualipure.domain.model.order import OrderStatus
from qualipure.domain.model.session import Role, Session


class AdvanceOrderHandler:

    def __init__(self, order_ledger: OrderLedger) -> None:
        self._order_ledger = order_ledger

    def handle(
        self,
        session: Session,
        order_id: str,
        new_status: OrderStatus | None = None,
    ) -> OrderDTO | None:
        """Advance an order; returns None if the order no longer exists."""
        session.require(Role.ADMIN)

        if new_status == OrderStatus.CANCELLED:
            raise AccessDeniedError("Only the customer can cancel an order")

        order = self._order_ledger.get_by_id(order_id)
        if order is None:
            return None

        target = new_status or order.status.next_status()
        if target is None:
            raise InvalidTransitionError(
                f"Order {order.short_id} is already {order.status.value}"
            )

        updated = self._order_ledger.update_status(order_id, target)
        return order_to_dto(updated) if updated else None
