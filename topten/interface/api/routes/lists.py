"""List routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel, Field

from topten.application.usecase.list import (
    CreateListRequest,
    CreateListResponse,
    CreateListUseCase,
    GetListRequest,
    GetListResponse,
    GetListUseCase,
    GetUserListsRequest,
    GetUserListsResponse,
    GetUserListsUseCase,
    JoinListRequest,
    JoinListResponse,
    JoinListUseCase,
    ToggleLockRequest,
    ToggleLockResponse,
    ToggleLockUseCase,
)
from topten.config import Settings
from topten.domain.service import IdentityService
from topten.interface.api.common import (
    raise_for_failure,
    request_context,
    resolve_caller,
    set_credential_cookies,
)

router = APIRouter(prefix="/lists", tags=["lists"], route_class=DishkaRoute)


class CreateListAPIRequest(BaseModel):
    """API request for creating a list."""

    name: str = Field(min_length=1, max_length=200)
    criteria: list[str] = Field(default_factory=list, max_length=20)
    # Newcomers without an identity yet
    display_name: str | None = Field(default=None, max_length=100)


class JoinListAPIRequest(BaseModel):
    """API request for joining a list."""

    display_name: str | None = Field(default=None, max_length=100)


@router.post("", response_model=CreateListResponse, status_code=status.HTTP_201_CREATED)
async def create_list(
    request: CreateListAPIRequest,
    http_request: Request,
    response: Response,
    create_list_use_case: FromDishka[CreateListUseCase],
    identity_service: FromDishka[IdentityService],
    settings: FromDishka[Settings],
) -> CreateListResponse:
    """Create a list. The creator becomes its owner and first member.

    The owner secret is returned in the body and set as the
    ``topten_owner_{list_id}`` cookie. It is not retrievable later.

    Args:
        request: List name, initial criteria and optional display name
        http_request: Incoming request (identity cookies and headers)
        response: Outgoing response credentials are set on
        create_list_use_case: Create list use case from DI
        identity_service: Identity service from DI
        settings: Application settings

    Returns:
        New list id and owner secret

    Raises:
        HTTPException: 401 without identity, 409 on duplicate criteria,
            422 on invalid names
    """
    identity = await resolve_caller(identity_service, request_context(http_request))
    result = await create_list_use_case.execute(
        CreateListRequest(
            name=request.name,
            criteria=request.criteria,
            identity=identity,
            display_name=request.display_name,
        )
    )
    raise_for_failure(result)
    set_credential_cookies(response, result.credentials, settings)
    return result


@router.get("", response_model=GetUserListsResponse)
async def get_user_lists(
    http_request: Request,
    get_user_lists_use_case: FromDishka[GetUserListsUseCase],
    identity_service: FromDishka[IdentityService],
) -> GetUserListsResponse:
    """Lists the caller created or joined.

    Token-linked identities are per list, so in that mode this is empty
    unless another credential identifies the caller.
    """
    identity = await resolve_caller(identity_service, request_context(http_request))
    result = await get_user_lists_use_case.execute(
        GetUserListsRequest(identity=identity)
    )
    raise_for_failure(result)
    return result


@router.get("/{list_id}", response_model=GetListResponse)
async def get_list(
    list_id: str,
    http_request: Request,
    get_list_use_case: FromDishka[GetListUseCase],
    identity_service: FromDishka[IdentityService],
) -> GetListResponse:
    """View a list with its items ranked best first.

    Open to anyone holding the link; membership and ownership flags reflect
    the caller.

    Raises:
        HTTPException: 404 if the list does not exist
    """
    context = request_context(http_request, list_id)
    identity = await resolve_caller(identity_service, context)
    result = await get_list_use_case.execute(
        GetListRequest(
            list_id=list_id,
            identity=identity,
            owner_secret=identity_service.owner_secret_from(context),
        )
    )
    raise_for_failure(result)
    return result


@router.post("/{list_id}/join", response_model=JoinListResponse)
async def join_list(
    list_id: str,
    http_request: Request,
    response: Response,
    join_list_use_case: FromDishka[JoinListUseCase],
    identity_service: FromDishka[IdentityService],
    settings: FromDishka[Settings],
    request: JoinListAPIRequest | None = None,
) -> JoinListResponse:
    """Join a list as a member. Joining twice is harmless.

    Raises:
        HTTPException: 401 without identity or display name, 404 if the
            list does not exist
    """
    identity = await resolve_caller(identity_service, request_context(http_request, list_id))
    result = await join_list_use_case.execute(
        JoinListRequest(
            list_id=list_id,
            identity=identity,
            display_name=request.display_name if request else None,
        )
    )
    raise_for_failure(result)
    if result.credential:
        set_credential_cookies(response, [result.credential], settings)
    return result


@router.post("/{list_id}/lock", response_model=ToggleLockResponse)
async def toggle_lock(
    list_id: str,
    http_request: Request,
    toggle_lock_use_case: FromDishka[ToggleLockUseCase],
) -> ToggleLockResponse:
    """Lock or unlock the list against new items. Owner only.

    The owner secret is read from ``X-Owner-Secret`` or the owner cookie.

    Raises:
        HTTPException: 403 on a wrong secret, 404 if the list does not exist
    """
    context = request_context(http_request, list_id)
    result = await toggle_lock_use_case.execute(
        ToggleLockRequest(
            list_id=list_id,
            owner_secret=IdentityService.owner_secret_from(context),
        )
    )
    raise_for_failure(result)
    return result
