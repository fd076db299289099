"""Key-value store interface."""

from abc import ABC, abstractmethod
from typing import Any


class KeyValueStore(ABC):
    """Generic asynchronous key-value store.

    Keys live in one flat string namespace and values are JSON-compatible
    (dicts, lists, strings, numbers, booleans, None). Implementations live in
    the persistence layer and are chosen once at startup.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Read a value.

        Args:
            key: Key to read

        Returns:
            The stored value, or None if the key is absent

        Raises:
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Write a value, replacing any previous one.

        Args:
            key: Key to write
            value: JSON-compatible value

        Raises:
            StorageError: If the backend cannot be written
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a key. Removing an absent key is not an error.

        Args:
            key: Key to remove

        Raises:
            StorageError: If the backend cannot be written
        """
        pass

    async def close(self) -> None:
        """Flush pending writes and release resources."""
        return None
