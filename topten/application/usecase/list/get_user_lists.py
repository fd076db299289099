"""Get user lists use case."""

from pydantic import BaseModel, Field

from topten.application.usecase.base import ActionResponse, BaseUseCase
from topten.domain.error import DomainError
from topten.domain.service import ListService
from topten.domain.value import ResolvedIdentity


class UserListSummary(BaseModel):
    """Summary of a list the user belongs to."""

    id: str
    name: str
    item_count: int
    member_count: int
    is_owner: bool


class GetUserListsRequest(BaseModel):
    """Get user lists request."""

    identity: ResolvedIdentity | None = None


class GetUserListsResponse(ActionResponse):
    """Get user lists response."""

    lists: list[UserListSummary] = Field(default_factory=list)


class GetUserListsUseCase(BaseUseCase):
    """Use case for listing the lists a user created or joined."""

    def __init__(self, list_service: ListService) -> None:
        """Initialize get user lists use case.

        Args:
            list_service: List domain service
        """
        self.list_service = list_service

    async def execute(self, request: GetUserListsRequest) -> GetUserListsResponse:
        """Execute get user lists flow."""
        try:
            lists = await self.list_service.get_user_lists(request.identity)
        except DomainError as e:
            return GetUserListsResponse.failure(e)

        user_id = request.identity.user_id if request.identity else None
        return GetUserListsResponse(
            lists=[
                UserListSummary(
                    id=top_ten_list.id,
                    name=top_ten_list.name,
                    item_count=len(top_ten_list.items),
                    member_count=len(top_ten_list.users),
                    is_owner=top_ten_list.is_owned_by(user_id),
                )
                for top_ten_list in lists
            ]
        )
