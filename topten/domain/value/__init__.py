"""Domain value objects for Top Ten."""

from topten.domain.value.identifiers import (
    CriterionId,
    ItemId,
    ListId,
    UserId,
    new_criterion_id,
    new_item_id,
    new_list_id,
    new_secret,
    new_user_id,
)
from topten.domain.value.types import (
    MAX_RATING,
    MIN_RATING,
    NO_EXPERIENCE,
    CriterionName,
    ErrorKind,
    IdentityMode,
    ResolvedIdentity,
    is_valid_rating,
)

__all__ = [
    # Identifiers
    "ListId",
    "ItemId",
    "CriterionId",
    "UserId",
    "new_list_id",
    "new_item_id",
    "new_criterion_id",
    "new_user_id",
    "new_secret",
    # Types
    "CriterionName",
    "ErrorKind",
    "IdentityMode",
    "ResolvedIdentity",
    "MIN_RATING",
    "MAX_RATING",
    "NO_EXPERIENCE",
    "is_valid_rating",
]
