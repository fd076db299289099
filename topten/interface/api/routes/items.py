"""Item routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field, StrictInt

from topten.application.usecase.item import (
    AddItemRequest,
    AddItemResponse,
    AddItemUseCase,
    RateItemRequest,
    RateItemResponse,
    RateItemUseCase,
    RemoveItemRequest,
    RemoveItemResponse,
    RemoveItemUseCase,
)
from topten.domain.service import IdentityService
from topten.interface.api.common import (
    raise_for_failure,
    request_context,
    resolve_caller,
)

router = APIRouter(prefix="/lists/{list_id}/items", tags=["items"], route_class=DishkaRoute)


class AddItemAPIRequest(BaseModel):
    """API request for adding an item."""

    name: str = Field(min_length=1, max_length=200)


class RateItemAPIRequest(BaseModel):
    """API request for rating an item. -1 means "no experience"."""

    value: StrictInt


@router.post("", response_model=AddItemResponse, status_code=status.HTTP_201_CREATED)
async def add_item(
    list_id: str,
    request: AddItemAPIRequest,
    http_request: Request,
    add_item_use_case: FromDishka[AddItemUseCase],
    identity_service: FromDishka[IdentityService],
) -> AddItemResponse:
    """Add an item. Members only, and only while the list is unlocked.

    Raises:
        HTTPException: 401 without identity, 403 for non-members or a locked
            list, 404 if the list does not exist
    """
    identity = await resolve_caller(identity_service, request_context(http_request, list_id))
    result = await add_item_use_case.execute(
        AddItemRequest(list_id=list_id, name=request.name, identity=identity)
    )
    raise_for_failure(result)
    return result


@router.put(
    "/{item_id}/ratings/{criterion_id}", response_model=RateItemResponse
)
async def rate_item(
    list_id: str,
    item_id: str,
    criterion_id: str,
    request: RateItemAPIRequest,
    http_request: Request,
    rate_item_use_case: FromDishka[RateItemUseCase],
    identity_service: FromDishka[IdentityService],
) -> RateItemResponse:
    """Rate an item on one criterion, replacing the caller's earlier rating."""
    identity = await resolve_caller(identity_service, request_context(http_request, list_id))
    result = await rate_item_use_case.execute(
        RateItemRequest(
            list_id=list_id,
            item_id=item_id,
            criterion_id=criterion_id,
            value=request.value,
            identity=identity,
        )
    )
    raise_for_failure(result)
    return result


@router.delete("/{item_id}", response_model=RemoveItemResponse)
async def remove_item(
    list_id: str,
    item_id: str,
    http_request: Request,
    remove_item_use_case: FromDishka[RemoveItemUseCase],
) -> RemoveItemResponse:
    """Remove an item with all its ratings. Owner only."""
    context = request_context(http_request, list_id)
    result = await remove_item_use_case.execute(
        RemoveItemRequest(
            list_id=list_id,
            item_id=item_id,
            owner_secret=IdentityService.owner_secret_from(context),
        )
    )
    raise_for_failure(result)
    return result
