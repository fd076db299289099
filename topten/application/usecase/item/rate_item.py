"""Rate item use case."""

from pydantic import BaseModel, StrictInt

from topten.application.usecase.base import ActionResponse, BaseUseCase
from topten.domain.error import DomainError
from topten.domain.service import ListService
from topten.domain.value import CriterionId, ItemId, ListId, ResolvedIdentity


class RateItemRequest(BaseModel):
    """Rate item request.

    ``value`` is 1-5, or -1 for "no experience".
    """

    list_id: str
    item_id: str
    criterion_id: str
    value: StrictInt
    identity: ResolvedIdentity | None = None


class RateItemResponse(ActionResponse):
    """Rate item response."""

    value: int | None = None


class RateItemUseCase(BaseUseCase):
    """Use case for rating an item on one criterion."""

    def __init__(self, list_service: ListService) -> None:
        """Initialize rate item use case.

        Args:
            list_service: List domain service
        """
        self.list_service = list_service

    async def execute(self, request: RateItemRequest) -> RateItemResponse:
        """Execute rate item flow. Re-rating replaces the earlier rating."""
        try:
            rating = await self.list_service.rate_item(
                ListId(request.list_id),
                request.identity,
                ItemId(request.item_id),
                CriterionId(request.criterion_id),
                request.value,
            )
        except DomainError as e:
            return RateItemResponse.failure(e)
        return RateItemResponse(value=rating.value)
