"""Remove criterion use case."""

from pydantic import BaseModel

from topten.application.usecase.base import ActionResponse, BaseUseCase
from topten.domain.error import DomainError
from topten.domain.service import ListService
from topten.domain.value import CriterionId, ListId


class RemoveCriterionRequest(BaseModel):
    """Remove criterion request."""

    list_id: str
    criterion_id: str
    owner_secret: str | None = None


class RemoveCriterionResponse(ActionResponse):
    """Remove criterion response."""


class RemoveCriterionUseCase(BaseUseCase):
    """Use case for the owner removing a criterion and its ratings."""

    def __init__(self, list_service: ListService) -> None:
        """Initialize remove criterion use case.

        Args:
            list_service: List domain service
        """
        self.list_service = list_service

    async def execute(self, request: RemoveCriterionRequest) -> RemoveCriterionResponse:
        """Execute remove criterion flow."""
        try:
            await self.list_service.remove_criterion(
                ListId(request.list_id),
                CriterionId(request.criterion_id),
                request.owner_secret,
            )
        except DomainError as e:
            return RemoveCriterionResponse.failure(e)
        return RemoveCriterionResponse()
