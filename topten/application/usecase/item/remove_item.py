"""Remove item use case."""

from pydantic import BaseModel

from topten.application.usecase.base import ActionResponse, BaseUseCase
from topten.domain.error import DomainError
from topten.domain.service import ListService
from topten.domain.value import ItemId, ListId


class RemoveItemRequest(BaseModel):
    """Remove item request."""

    list_id: str
    item_id: str
    owner_secret: str | None = None


class RemoveItemResponse(ActionResponse):
    """Remove item response."""


class RemoveItemUseCase(BaseUseCase):
    """Use case for the owner removing an item."""

    def __init__(self, list_service: ListService) -> None:
        """Initialize remove item use case.

        Args:
            list_service: List domain service
        """
        self.list_service = list_service

    async def execute(self, request: RemoveItemRequest) -> RemoveItemResponse:
        """Execute remove item flow."""
        try:
            await self.list_service.remove_item(
                ListId(request.list_id), ItemId(request.item_id), request.owner_secret
            )
        except DomainError as e:
            return RemoveItemResponse.failure(e)
        return RemoveItemResponse()
