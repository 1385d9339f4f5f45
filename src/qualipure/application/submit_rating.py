"""Application service: Submit Rating use case (customer)."""

from __future__ import annotations

import logging

from qualipure.application.dto import RatingDTO, rating_to_dto
from qualipure.domain.ledger.rating_ledger import RatingLedger
from qualipure.domain.model.rating import RatingEntry
from qualipure.domain.model.session import Role, Session
from qualipure.domain.service.id_generator import TimeIdGenerator

logger = logging.getLogger(__name__)


class SubmitRatingHandler:

    def __init__(self, rating_ledger: RatingLedger, id_generator: TimeIdGenerator) -> None:
        self._rating_ledger = rating_ledger
        self._id_generator = id_generator

    def handle(self, session: Session, rating: int | None, comment: str | None = None) -> RatingDTO:
        """Validate the form, then append the rating.

        Nothing reaches the ledger if validation fails.
        """
        session.require(Role.CUSTOMER)
        entry = RatingEntry.create(
            rating_id=self._id_generator.next_id(),
            rating=rating,
            comment=comment,
            submission_date=self._id_generator.clock(),
        )
        self._rating_ledger.submit(entry)
        logger.info("Rating %s received: %d star(s)", entry.id, entry.rating)
        return rating_to_dto(entry)
