"""Join list use case."""

from pydantic import BaseModel

from topten.application.usecase.base import ActionResponse, BaseUseCase
from topten.domain.error import DomainError
from topten.domain.service import IdentityService, IssuedCredential, ListService
from topten.domain.value import ListId, ResolvedIdentity


class JoinListRequest(BaseModel):
    """Join list request."""

    list_id: str
    identity: ResolvedIdentity | None = None
    display_name: str | None = None


class JoinListResponse(ActionResponse):
    """Join list response."""

    user_id: str | None = None
    display_name: str | None = None
    credential: IssuedCredential | None = None


class JoinListUseCase(BaseUseCase):
    """Use case for joining a list as a member."""

    def __init__(self, list_service: ListService, identity_service: IdentityService) -> None:
        """Initialize join list use case.

        Args:
            list_service: List domain service
            identity_service: Identity domain service
        """
        self.list_service = list_service
        self.identity_service = identity_service

    async def execute(self, request: JoinListRequest) -> JoinListResponse:
        """Execute join list flow.

        A caller without an identity who supplies a display name gets one
        minted when the identity mode allows it. Joining twice returns the
        existing member.

        Args:
            request: Join list request

        Returns:
            The member id and, when one is needed, the credential to keep
        """
        identity = self.identity_service.ensure_identity(
            request.identity, request.display_name
        )
        list_id = ListId(request.list_id)
        try:
            member = await self.list_service.join_list(
                list_id,
                identity,
                display_name=request.display_name,
                link_token=self.identity_service.links_members,
            )
        except DomainError as e:
            return JoinListResponse.failure(e)

        return JoinListResponse(
            user_id=member.id,
            display_name=member.display_name,
            credential=self.identity_service.credential_for(list_id, identity, member),
        )
