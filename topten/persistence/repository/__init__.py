"""Repository implementations."""

from .top_ten_list import KeyValueTopTenListRepository

__all__ = [
    "KeyValueTopTenListRepository",
]
