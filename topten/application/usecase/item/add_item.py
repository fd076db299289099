"""Add item use case."""

from pydantic import BaseModel

from topten.application.usecase.base import ActionResponse, BaseUseCase
from topten.domain.error import DomainError
from topten.domain.service import ListService
from topten.domain.value import ListId, ResolvedIdentity


class AddItemRequest(BaseModel):
    """Add item request."""

    list_id: str
    name: str
    identity: ResolvedIdentity | None = None


class AddItemResponse(ActionResponse):
    """Add item response."""

    item_id: str | None = None


class AddItemUseCase(BaseUseCase):
    """Use case for adding an item to a list."""

    def __init__(self, list_service: ListService) -> None:
        """Initialize add item use case.

        Args:
            list_service: List domain service
        """
        self.list_service = list_service

    async def execute(self, request: AddItemRequest) -> AddItemResponse:
        """Execute add item flow.

        Fails for non-members and while the list is locked.
        """
        try:
            item = await self.list_service.add_item(
                ListId(request.list_id), request.identity, request.name
            )
        except DomainError as e:
            return AddItemResponse.failure(e)
        return AddItemResponse(item_id=item.id)
