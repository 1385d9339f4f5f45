"""Application service: List Ratings use case (admin, query)."""

from __future__ import annotations

from qualipure.application.dto import RatingDTO, rating_to_dto
from qualipure.domain.ledger.rating_ledger import RatingLedger
from qualipure.domain.model.session import Role, Session


class ListRatingsHandler:

    def __init__(self, rating_ledger: RatingLedger) -> None:
        self._rating_ledger = rating_ledger

    def handle(self, session: Session) -> list[RatingDTO]:
        session.require(Role.ADMIN)
        return [rating_to_dto(entry) for entry in self._rating_ledger]

    def average(self, session: Session) -> float | None:
        session.require(Role.ADMIN)
        return self._rating_ledger.average_rating
