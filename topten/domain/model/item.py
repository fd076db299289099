"""Item entity."""

from datetime import datetime, timezone

from pydantic import Field

from topten.domain.model.common import DomainModel
from topten.domain.model.rating import Rating
from topten.domain.value import CriterionId, ItemId, UserId


class Item(DomainModel):
    """A candidate in the list, rated by members on each criterion."""

    id: ItemId
    name: str = Field(min_length=1, max_length=200)
    added_by: UserId
    added_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    ratings: list[Rating] = Field(default_factory=list)

    def rating_for(self, user_id: UserId, criterion_id: CriterionId) -> Rating | None:
        for rating in self.ratings:
            if rating.user_id == user_id and rating.criterion_id == criterion_id:
                return rating
        return None

    def with_rating(self, rating: Rating) -> "Item":
        """Return a copy where ``rating`` replaces any earlier one by the same
        user on the same criterion."""
        kept = [
            r
            for r in self.ratings
            if not (r.user_id == rating.user_id and r.criterion_id == rating.criterion_id)
        ]
        return self.model_copy(update={"ratings": [*kept, rating]})

    def without_criterion(self, criterion_id: CriterionId) -> "Item":
        """Return a copy with every rating on ``criterion_id`` dropped."""
        kept = [r for r in self.ratings if r.criterion_id != criterion_id]
        return self.model_copy(update={"ratings": kept})
