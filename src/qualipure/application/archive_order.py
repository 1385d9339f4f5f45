"""Application service: Archive Order use case (admin)."""

from __future__ import annotations

from qualipure.application.dto import OrderDTO, order_to_dto
from qualipure.domain.ledger.order_ledger import OrderLedger
from qualipure.domain.model.session import Role, Session


class ArchiveOrderHandler:

    def __init__(self, order_ledger: OrderLedger) -> None:
        self._order_ledger = order_ledger

    def handle(self, session: Session, order_id: str) -> OrderDTO | None:
        """Move a DELIVERED or CANCELLED order to the admin archive."""
        session.require(Role.ADMIN)
        updated = self._order_ledger.archive_for_admin(order_id)
        return order_to_dto(updated) if updated else None
