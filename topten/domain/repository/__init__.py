"""Repository interfaces for the Top Ten domain.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from topten.domain.repository.key_value import KeyValueStore
from topten.domain.repository.top_ten_list import TopTenListRepository

__all__ = [
    "KeyValueStore",
    "TopTenListRepository",
]
