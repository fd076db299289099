"""Domain services."""

from .base import Service
from .identity_service import (
    IdentityResolver,
    IdentityService,
    IssuedCredential,
    RequestContext,
)
from .list_service import ListService
from .ranking_service import RankingService
from .scoring import rank, score_item, user_rated_count

__all__ = [
    "IdentityResolver",
    "IdentityService",
    "IssuedCredential",
    "ListService",
    "RankingService",
    "RequestContext",
    "Service",
    "rank",
    "score_item",
    "user_rated_count",
]
