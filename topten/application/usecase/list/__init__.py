"""List use cases."""

from .create_list import CreateListRequest, CreateListResponse, CreateListUseCase
from .get_list import GetListRequest, GetListResponse, GetListUseCase
from .get_user_lists import (
    GetUserListsRequest,
    GetUserListsResponse,
    GetUserListsUseCase,
    UserListSummary,
)
from .join_list import JoinListRequest, JoinListResponse, JoinListUseCase
from .toggle_lock import ToggleLockRequest, ToggleLockResponse, ToggleLockUseCase

__all__ = [
    "CreateListRequest",
    "CreateListResponse",
    "CreateListUseCase",
    "GetListRequest",
    "GetListResponse",
    "GetListUseCase",
    "GetUserListsRequest",
    "GetUserListsResponse",
    "GetUserListsUseCase",
    "UserListSummary",
    "JoinListRequest",
    "JoinListResponse",
    "JoinListUseCase",
    "ToggleLockRequest",
    "ToggleLockResponse",
    "ToggleLockUseCase",
]
