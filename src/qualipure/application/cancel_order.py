"""Application service: Cancel Order use case (customer).

Only a PENDING order can be cancelled; once the admin has started
preparing it the Order aggregate rejects the transition.
"""

from __future__ import annotations

from qualipure.application.dto import OrderDTO, order_to_dto
from qualipure.domain.exceptions import AccessDeniedError
from qualipure.domain.ledger.order_ledger import OrderLedger
from qualipure.domain.model.order import OrderStatus
from qualipure.domain.model.session import Role, Session


class CancelOrderHandler:

    def __init__(self, order_ledger: OrderLedger) -> None:
        self._order_ledger = order_ledger

    def handle(self, session: Session, order_id: str) -> OrderDTO | None:
        session.require(Role.CUSTOMER)

        order = self._order_ledger.get_by_id(order_id)
        if order is None:
            return None
        if order.customer_name != session.username:
            raise AccessDeniedError(f"Order {order.short_id} belongs to another customer")

        updated = self._order_ledger.update_status(order_id, OrderStatus.CANCELLED)
        return order_to_dto(updated) if updated else None
