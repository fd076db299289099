"""Item use cases."""

from .add_item import AddItemRequest, AddItemResponse, AddItemUseCase
from .rate_item import RateItemRequest, RateItemResponse, RateItemUseCase
from .remove_item import RemoveItemRequest, RemoveItemResponse, RemoveItemUseCase

__all__ = [
    "AddItemRequest",
    "AddItemResponse",
    "AddItemUseCase",
    "RateItemRequest",
    "RateItemResponse",
    "RateItemUseCase",
    "RemoveItemRequest",
    "RemoveItemResponse",
    "RemoveItemUseCase",
]
