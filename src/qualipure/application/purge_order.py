"""Application service: Purge Order use case (admin).

Physically removes the order from the ledger, for both the admin and
the customer. Use archiving for the normal end of an order's life.
"""

from __future__ import annotations

import logging

from qualipure.application.dto import OrderDTO, order_to_dto
from qualipure.domain.ledger.order_ledger import OrderLedger
from qualipure.domain.model.session import Role, Session

logger = logging.getLogger(__name__)


class PurgeOrderHandler:

    def __init__(self, order_ledger: OrderLedger) -> None:
        self._order_ledger = order_ledger

    def handle(self, session: Session, order_id: str) -> OrderDTO | None:
        session.require(Role.ADMIN)
        removed = self._order_ledger.remove_order(order_id)
        if removed is None:
            return None
        logger.info("Order %s purged by %s", removed.id, session.username)
        return order_to_dto(removed)
