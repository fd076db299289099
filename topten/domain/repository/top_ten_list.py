"""TopTenList repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from topten.domain.model.top_ten_list import TopTenList
from topten.domain.value import ListId, UserId


class TopTenListRepository(ABC):
    """Repository for the TopTenList aggregate.

    Saves always replace the whole aggregate. Two concurrent
    read-modify-write cycles on the same list race, and the later save wins.
    """

    @abstractmethod
    async def find_by_id(self, list_id: ListId) -> Optional[TopTenList]:
        """Find a list by ID.

        Args:
            list_id: The list's unique identifier

        Returns:
            The list if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, top_ten_list: TopTenList) -> TopTenList:
        """Save a list (create or replace).

        Args:
            top_ten_list: The aggregate to save

        Returns:
            The saved aggregate
        """
        pass

    @abstractmethod
    async def delete(self, list_id: ListId) -> None:
        """Delete a list (hard delete).

        Not used by the list flows; lists are never removed by members.

        Args:
            list_id: The list ID to delete
        """
        pass

    @abstractmethod
    async def find_list_ids_for_user(self, user_id: UserId) -> list[ListId]:
        """Find the ids of lists a user has created or joined.

        Args:
            user_id: The user's ID

        Returns:
            List ids in the order they were joined
        """
        pass

    @abstractmethod
    async def add_list_for_user(self, user_id: UserId, list_id: ListId) -> None:
        """Record that a user belongs to a list. Idempotent.

        Args:
            user_id: The user's ID
            list_id: The list ID
        """
        pass
