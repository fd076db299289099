"""Rating entity."""

from pydantic import StrictInt, field_validator

from topten.domain.model.common import DomainModel
from topten.domain.value import CriterionId, UserId, is_valid_rating


class Rating(DomainModel):
    """One member's rating of an item on one criterion.

    Business rules:
    - value is 1-5, or -1 for an explicit "no experience"
    - never rated means no Rating record at all
    - at most one rating per (user, criterion) on an item
    """

    user_id: UserId
    criterion_id: CriterionId
    value: StrictInt

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: int) -> int:
        """Reject values outside {-1} and 1-5."""
        if not is_valid_rating(v):
            raise ValueError("Rating must be 1-5, or -1 for no experience")
        return v

    @property
    def is_scored(self) -> bool:
        """Whether the rating counts towards the score."""
        return self.value > 0
