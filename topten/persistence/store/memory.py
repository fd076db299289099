"""In-memory key-value store."""

import copy
from typing import Any

from topten.domain.repository.key_value import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store. Used for tests and throwaway development runs.

    Values are deep-copied on the way in and out so callers never share
    mutable state with the store.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    async def get(self, key: str) -> Any | None:
        """Read a value."""
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    async def set(self, key: str, value: Any) -> None:
        """Write a value."""
        self._data[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> None:
        """Remove a key."""
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)
