"""Application service: order list queries.

Each screen is a filter over the same ledger: the customer's history
(minus soft-deleted orders), the admin's live list and the admin's
archive.
"""

from __future__ import annotations

from qualipure.application.dto import OrderDTO, order_to_dto
from qualipure.domain.exceptions import EntityNotFoundError
from qualipure.domain.ledger.order_ledger import OrderLedger
from qualipure.domain.model.session import Role, Session


class ListOrdersHandler:

    def __init__(self, order_ledger: OrderLedger) -> None:
        self._order_ledger = order_ledger

    def customer_orders(self, session: Session) -> list[OrderDTO]:
        session.require(Role.CUSTOMER)
        return [
            order_to_dto(order)
            for order in self._order_ledger.customer_orders(session.username)
        ]

    def admin_live_orders(self, session: Session) -> list[OrderDTO]:
        session.require(Role.ADMIN)
        return [order_to_dto(order) for order in self._order_ledger.admin_live_orders()]

    def admin_archived_orders(self, session: Session) -> list[OrderDTO]:
        session.require(Role.ADMIN)
        return [
            order_to_dto(order) for order in self._order_ledger.admin_archived_orders()
        ]

    def show(self, session: Session, order_id: str) -> OrderDTO:
        """Return one order, as far as the session is allowed to see it."""
        order = self._order_ledger.get_by_id(order_id)
        if order is not None and not session.is_admin:
            if order.customer_deleted or order.customer_name != session.username:
                order = None
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return order_to_dto(order)
