"""Rating Ledger — append-only record of submitted ratings."""

from __future__ import annotations

import logging

from qualipure.domain.ledger.observable import ObservableLedger
from qualipure.domain.model.rating import RatingEntry

logger = logging.getLogger(__name__)


class RatingLedger(ObservableLedger[RatingEntry]):

    def submit(self, entry: RatingEntry) -> None:
        """Append an already-validated entry."""
        self._publish(self._items + (entry,))
        logger.debug("Rating %s submitted (%d stars)", entry.id, entry.rating)

    @property
    def average_rating(self) -> float | None:
        if not self._items:
            return None
        return sum(entry.rating for entry in self._items) / len(self._items)
