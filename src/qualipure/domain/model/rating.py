"""RatingEntry — a customer's star rating of the service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from qualipure.domain.exceptions import ValidationError

MIN_RATING = 1
MAX_RATING = 5
MAX_COMMENT_LENGTH = 150


@dataclass(frozen=True)
class RatingEntry:
    id: str
    rating: int
    comment: str | None
    submission_date: datetime

    @staticmethod
    def create(
        rating_id: str,
        rating: int | None,
        comment: str | None,
        submission_date: datetime,
    ) -> RatingEntry:
        """Validate the submitted form and build an entry.

        A blank comment is stored as ``None``.
        """
        if not rating:
            raise ValidationError("Please select a rating.")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}"
            )

        text = comment.strip() if comment else ""
        if len(text) > MAX_COMMENT_LENGTH:
            raise ValidationError(
                f"Comment is limited to {MAX_COMMENT_LENGTH} characters "
                f"(got {len(text)})"
            )

        return RatingEntry(
            id=rating_id,
            rating=rating,
            comment=text or None,
            submission_date=submission_date,
        )

    @property
    def short_id(self) -> str:
        return self.id[-6:]
