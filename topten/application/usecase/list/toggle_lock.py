"""Toggle lock use case."""

from pydantic import BaseModel

from topten.application.usecase.base import ActionResponse, BaseUseCase
from topten.domain.error import DomainError
from topten.domain.service import ListService
from topten.domain.value import ListId


class ToggleLockRequest(BaseModel):
    """Toggle lock request."""

    list_id: str
    owner_secret: str | None = None


class ToggleLockResponse(ActionResponse):
    """Toggle lock response."""

    is_locked: bool | None = None


class ToggleLockUseCase(BaseUseCase):
    """Use case for locking or unlocking a list against new items."""

    def __init__(self, list_service: ListService) -> None:
        """Initialize toggle lock use case.

        Args:
            list_service: List domain service
        """
        self.list_service = list_service

    async def execute(self, request: ToggleLockRequest) -> ToggleLockResponse:
        """Execute toggle lock flow."""
        try:
            is_locked = await self.list_service.toggle_lock(
                ListId(request.list_id), request.owner_secret
            )
        except DomainError as e:
            return ToggleLockResponse.failure(e)
        return ToggleLockResponse(is_locked=is_locked)
