"""Criterion routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from topten.application.usecase.criterion import (
    AddCriterionRequest,
    AddCriterionResponse,
    AddCriterionUseCase,
    RemoveCriterionRequest,
    RemoveCriterionResponse,
    RemoveCriterionUseCase,
)
from topten.domain.service import IdentityService
from topten.interface.api.common import raise_for_failure, request_context

router = APIRouter(
    prefix="/lists/{list_id}/criteria", tags=["criteria"], route_class=DishkaRoute
)


class AddCriterionAPIRequest(BaseModel):
    """API request for adding a criterion."""

    name: str = Field(min_length=1, max_length=100)


@router.post(
    "", response_model=AddCriterionResponse, status_code=status.HTTP_201_CREATED
)
async def add_criterion(
    list_id: str,
    request: AddCriterionAPIRequest,
    http_request: Request,
    add_criterion_use_case: FromDishka[AddCriterionUseCase],
) -> AddCriterionResponse:
    """Add a criterion. Owner only.

    Raises:
        HTTPException: 403 on a wrong secret, 409 if the name is taken
            (case-insensitively)
    """
    context = request_context(http_request, list_id)
    result = await add_criterion_use_case.execute(
        AddCriterionRequest(
            list_id=list_id,
            name=request.name,
            owner_secret=IdentityService.owner_secret_from(context),
        )
    )
    raise_for_failure(result)
    return result


@router.delete("/{criterion_id}", response_model=RemoveCriterionResponse)
async def remove_criterion(
    list_id: str,
    criterion_id: str,
    http_request: Request,
    remove_criterion_use_case: FromDishka[RemoveCriterionUseCase],
) -> RemoveCriterionResponse:
    """Remove a criterion and every rating on it. Owner only."""
    context = request_context(http_request, list_id)
    result = await remove_criterion_use_case.execute(
        RemoveCriterionRequest(
            list_id=list_id,
            criterion_id=criterion_id,
            owner_secret=IdentityService.owner_secret_from(context),
        )
    )
    raise_for_failure(result)
    return result
