"""Add criterion use case."""

from pydantic import BaseModel

from topten.application.usecase.base import ActionResponse, BaseUseCase
from topten.domain.error import DomainError
from topten.domain.service import ListService
from topten.domain.value import ListId


class AddCriterionRequest(BaseModel):
    """Add criterion request."""

    list_id: str
    name: str
    owner_secret: str | None = None


class AddCriterionResponse(ActionResponse):
    """Add criterion response."""

    criterion_id: str | None = None
    name: str | None = None


class AddCriterionUseCase(BaseUseCase):
    """Use case for the owner adding a criterion."""

    def __init__(self, list_service: ListService) -> None:
        """Initialize add criterion use case.

        Args:
            list_service: List domain service
        """
        self.list_service = list_service

    async def execute(self, request: AddCriterionRequest) -> AddCriterionResponse:
        """Execute add criterion flow."""
        try:
            criterion = await self.list_service.add_criterion(
                ListId(request.list_id), request.name, request.owner_secret
            )
        except DomainError as e:
            return AddCriterionResponse.failure(e)
        return AddCriterionResponse(criterion_id=criterion.id, name=criterion.name.root)
