"""Criterion use cases."""

from .add_criterion import AddCriterionRequest, AddCriterionResponse, AddCriterionUseCase
from .remove_criterion import (
    RemoveCriterionRequest,
    RemoveCriterionResponse,
    RemoveCriterionUseCase,
)

__all__ = [
    "AddCriterionRequest",
    "AddCriterionResponse",
    "AddCriterionUseCase",
    "RemoveCriterionRequest",
    "RemoveCriterionResponse",
    "RemoveCriterionUseCase",
]
