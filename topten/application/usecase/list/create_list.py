"""Create list use case."""

from pydantic import BaseModel, Field

from topten.application.usecase.base import ActionResponse, BaseUseCase
from topten.domain.error import DomainError
from topten.domain.service import IdentityService, IssuedCredential, ListService
from topten.domain.value import ResolvedIdentity


class CreateListRequest(BaseModel):
    """Create list request."""

    name: str
    criteria: list[str] = Field(default_factory=list)
    identity: ResolvedIdentity | None = None
    # Lets a first-time participant create a list in modes that mint identities
    display_name: str | None = None


class CreateListResponse(ActionResponse):
    """Create list response.

    ``owner_secret`` is returned exactly once, here.
    """

    list_id: str | None = None
    owner_secret: str | None = None
    user_id: str | None = None
    credentials: list[IssuedCredential] = Field(default_factory=list)


class CreateListUseCase(BaseUseCase):
    """Use case for creating a list with its initial criteria."""

    def __init__(self, list_service: ListService, identity_service: IdentityService) -> None:
        """Initialize create list use case.

        Args:
            list_service: List domain service
            identity_service: Identity domain service
        """
        self.list_service = list_service
        self.identity_service = identity_service

    async def execute(self, request: CreateListRequest) -> CreateListResponse:
        """Execute create list flow.

        Args:
            request: Create list request

        Returns:
            The new list id, its owner secret and the cookies to set
        """
        identity = self.identity_service.ensure_identity(
            request.identity, request.display_name
        )
        try:
            top_ten_list = await self.list_service.create_list(
                identity,
                request.name,
                request.criteria,
                link_token=self.identity_service.links_members,
            )
        except DomainError as e:
            return CreateListResponse.failure(e)

        credentials = [
            self.identity_service.owner_credential(
                top_ten_list.id, top_ten_list.owner_secret
            )
        ]
        creator = top_ten_list.users[0]
        member_credential = self.identity_service.credential_for(
            top_ten_list.id, identity, creator
        )
        if member_credential:
            credentials.append(member_credential)

        return CreateListResponse(
            list_id=top_ten_list.id,
            owner_secret=top_ten_list.owner_secret,
            user_id=creator.id,
            credentials=credentials,
        )
