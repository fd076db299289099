"""Identity routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel, Field

from topten.application.usecase.identity import (
    IssueIdentityRequest,
    IssueIdentityResponse,
    IssueIdentityUseCase,
)
from topten.config import Settings
from topten.interface.api.common import raise_for_failure, set_credential_cookies

router = APIRouter(prefix="/identity", tags=["identity"], route_class=DishkaRoute)


class IssueIdentityAPIRequest(BaseModel):
    """API request for picking a display name."""

    display_name: str = Field(min_length=1, max_length=100)


@router.post(
    "/anonymous",
    response_model=IssueIdentityResponse,
    status_code=status.HTTP_201_CREATED,
)
async def issue_anonymous_identity(
    request: IssueIdentityAPIRequest,
    response: Response,
    issue_identity_use_case: FromDishka[IssueIdentityUseCase],
    settings: FromDishka[Settings],
) -> IssueIdentityResponse:
    """Issue a signed identity cookie for a display name.

    Only available in anonymous cookie mode; other modes answer 403.

    Args:
        request: Display name
        response: Outgoing response the cookie is set on
        issue_identity_use_case: Issue identity use case from DI
        settings: Application settings

    Returns:
        The new user id and display name

    Raises:
        HTTPException: If the identity mode cannot issue identities
    """
    result = await issue_identity_use_case.execute(
        IssueIdentityRequest(display_name=request.display_name)
    )
    raise_for_failure(result)
    if result.credential:
        set_credential_cookies(response, [result.credential], settings)
    return result
