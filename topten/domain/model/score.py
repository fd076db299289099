"""Computed scores for items.

Scores are derived from the list on every read and never persisted.
"""

from pydantic import Field

from topten.domain.model.common import DomainModel
from topten.domain.model.item import Item
from topten.domain.value import CriterionId, UserId


class CriterionScore(DomainModel):
    """Mean and count of the scored ratings on one criterion."""

    average: float
    count: int = Field(ge=1)


class ItemScore(DomainModel):
    """An item together with its normalized score.

    ``average_score`` is in [0, 1] for a consistent list. ``total_ratings``
    counts scored ratings and is a confidence signal only.
    """

    item: Item
    average_score: float = Field(ge=0.0)
    total_ratings: int = Field(ge=0)
    criteria_scores: dict[CriterionId, CriterionScore] = Field(default_factory=dict)
    ratings_by_user: dict[UserId, int] = Field(default_factory=dict)
