"""Key-value implementation of the TopTenList repository."""

from typing import Optional

import logfire
from pydantic import ValidationError

from topten.domain.error import StorageError
from topten.domain.model.top_ten_list import TopTenList
from topten.domain.repository import KeyValueStore, TopTenListRepository
from topten.domain.value import ListId, UserId

LIST_PREFIX = "list:"
USER_LISTS_PREFIX = "user_lists:"


def list_key(list_id: ListId) -> str:
    return f"{LIST_PREFIX}{list_id}"


def user_lists_key(user_id: UserId) -> str:
    return f"{USER_LISTS_PREFIX}{user_id}"


class KeyValueTopTenListRepository(TopTenListRepository):
    """Stores each list as one JSON document under ``list:{id}`` and keeps a
    membership index of list ids under ``user_lists:{user_id}``."""

    def __init__(self, store: KeyValueStore) -> None:
        """Initialize repository with a key-value store.

        Args:
            store: Backing key-value store
        """
        self.store = store

    async def find_by_id(self, list_id: ListId) -> Optional[TopTenList]:
        """Find a list by ID."""
        data = await self.store.get(list_key(list_id))
        if data is None:
            return None
        try:
            return TopTenList.model_validate(data)
        except ValidationError as e:
            logfire.error("Stored list is corrupt", list_id=list_id, error=str(e))
            raise StorageError(f"Stored list {list_id} cannot be decoded") from e

    async def save(self, top_ten_list: TopTenList) -> TopTenList:
        """Save a list, replacing the stored document."""
        await self.store.set(
            list_key(top_ten_list.id), top_ten_list.model_dump(mode="json")
        )
        return top_ten_list

    async def delete(self, list_id: ListId) -> None:
        """Delete a list."""
        await self.store.delete(list_key(list_id))

    async def find_list_ids_for_user(self, user_id: UserId) -> list[ListId]:
        """Find list ids from the membership index."""
        data = await self.store.get(user_lists_key(user_id))
        if not data:
            return []
        return [ListId(list_id) for list_id in data]

    async def add_list_for_user(self, user_id: UserId, list_id: ListId) -> None:
        """Append a list id to the membership index if missing."""
        current = await self.find_list_ids_for_user(user_id)
        if list_id in current:
            return
        await self.store.set(user_lists_key(user_id), [*current, list_id])
