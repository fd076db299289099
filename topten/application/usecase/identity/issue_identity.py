"""Issue anonymous identity use case."""

from pydantic import BaseModel

from topten.application.usecase.base import ActionResponse, BaseUseCase
from topten.domain.error import DomainError
from topten.domain.service import IdentityService, IssuedCredential


class IssueIdentityRequest(BaseModel):
    """Issue identity request."""

    display_name: str


class IssueIdentityResponse(ActionResponse):
    """Issue identity response."""

    user_id: str | None = None
    display_name: str | None = None
    credential: IssuedCredential | None = None


class IssueIdentityUseCase(BaseUseCase):
    """Use case for a newcomer picking a display name before touching a list.

    Only strategies that recognize callers across lists (anonymous cookie)
    can issue a standalone identity.
    """

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize issue identity use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: IssueIdentityRequest) -> IssueIdentityResponse:
        """Execute issue identity flow."""
        try:
            identity, credential = self.identity_service.issue_identity(
                request.display_name
            )
        except DomainError as e:
            return IssueIdentityResponse.failure(e)
        return IssueIdentityResponse(
            user_id=identity.user_id,
            display_name=identity.display_name,
            credential=credential,
        )
