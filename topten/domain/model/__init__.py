"""Domain model entities for Top Ten."""

from topten.domain.model.criterion import Criterion
from topten.domain.model.item import Item
from topten.domain.model.rating import Rating
from topten.domain.model.score import CriterionScore, ItemScore
from topten.domain.model.top_ten_list import TopTenList
from topten.domain.model.user import User

__all__ = [
    "TopTenList",
    "Criterion",
    "Item",
    "Rating",
    "User",
    "ItemScore",
    "CriterionScore",
]
