"""Get list use case.

Builds the read model a client renders: the list without its owner secret,
items ranked by score, and the caller's relation to the list.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from topten.application.usecase.base import ActionResponse, BaseUseCase
from topten.domain.error import DomainError
from topten.domain.service import ListService, RankingService, user_rated_count
from topten.domain.value import ListId, ResolvedIdentity


class CriterionView(BaseModel):
    id: str
    name: str


class MemberView(BaseModel):
    id: str
    display_name: str
    joined_at: datetime
    avatar_url: str | None = None


class RatingView(BaseModel):
    user_id: str
    criterion_id: str
    value: int


class CriterionScoreView(BaseModel):
    average: float
    count: int


class RankedItemView(BaseModel):
    """One item with its position in the ranking."""

    position: int
    item_id: str
    name: str
    added_by: str
    added_at: datetime
    average_score: float
    total_ratings: int
    criteria_scores: dict[str, CriterionScoreView]
    ratings: list[RatingView]


class GetListRequest(BaseModel):
    """Get list request."""

    list_id: str
    identity: ResolvedIdentity | None = None
    owner_secret: str | None = None


class GetListResponse(ActionResponse):
    """Get list response."""

    list_id: str | None = None
    name: str | None = None
    owner_id: str | None = None
    created_at: datetime | None = None
    is_locked: bool = False
    criteria: list[CriterionView] = Field(default_factory=list)
    members: list[MemberView] = Field(default_factory=list)
    ranked_items: list[RankedItemView] = Field(default_factory=list)
    user_id: str | None = None
    is_member: bool = False
    is_owner: bool = False
    rated_item_count: int = 0


class GetListUseCase(BaseUseCase):
    """Use case for viewing a list with its ranking."""

    def __init__(self, list_service: ListService, ranking_service: RankingService) -> None:
        """Initialize get list use case.

        Args:
            list_service: List domain service
            ranking_service: Ranking domain service
        """
        self.list_service = list_service
        self.ranking_service = ranking_service

    async def execute(self, request: GetListRequest) -> GetListResponse:
        """Execute get list flow.

        Args:
            request: Get list request

        Returns:
            List read model; never contains the owner secret or member tokens
        """
        try:
            top_ten_list = await self.list_service.get_list(ListId(request.list_id))
        except DomainError as e:
            return GetListResponse.failure(e)

        scores = self.ranking_service.rank_list(top_ten_list)
        user_id = request.identity.user_id if request.identity else None

        return GetListResponse(
            list_id=top_ten_list.id,
            name=top_ten_list.name,
            owner_id=top_ten_list.owner_id,
            created_at=top_ten_list.created_at,
            is_locked=top_ten_list.is_locked,
            criteria=[
                CriterionView(id=c.id, name=c.name.root) for c in top_ten_list.criteria
            ],
            members=[
                MemberView(
                    id=u.id,
                    display_name=u.display_name,
                    joined_at=u.joined_at,
                    avatar_url=u.avatar_url,
                )
                for u in top_ten_list.users
            ],
            ranked_items=[
                RankedItemView(
                    position=position,
                    item_id=score.item.id,
                    name=score.item.name,
                    added_by=score.item.added_by,
                    added_at=score.item.added_at,
                    average_score=score.average_score,
                    total_ratings=score.total_ratings,
                    criteria_scores={
                        cid: CriterionScoreView(average=s.average, count=s.count)
                        for cid, s in score.criteria_scores.items()
                    },
                    ratings=[
                        RatingView(
                            user_id=r.user_id, criterion_id=r.criterion_id, value=r.value
                        )
                        for r in score.item.ratings
                    ],
                )
                for position, score in enumerate(scores, start=1)
            ],
            user_id=user_id,
            is_member=user_id is not None and top_ten_list.has_member(user_id),
            is_owner=top_ten_list.verify_owner(request.owner_secret),
            rated_item_count=(
                user_rated_count(top_ten_list.items, user_id) if user_id else 0
            ),
        )
