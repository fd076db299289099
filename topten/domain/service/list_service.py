"""List domain service.

Every mutation is one read-modify-write cycle on the whole aggregate:
load the list, build a new list value, save it. Nothing is written when a
check fails. Concurrent cycles on the same list are not isolated; the last
save wins.
"""

from collections.abc import Sequence
from typing import Any, TypeVar

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from topten.domain.error import (
    ConflictError,
    ListLockedError,
    NotAMemberError,
    NotFoundError,
    UnauthenticatedError,
    UnauthorizedError,
    ValidationError,
)
from topten.domain.model import Criterion, Item, Rating, TopTenList, User
from topten.domain.repository import TopTenListRepository
from topten.domain.value import (
    CriterionId,
    CriterionName,
    ItemId,
    ListId,
    ResolvedIdentity,
    new_criterion_id,
    new_item_id,
    new_list_id,
    new_secret,
)

from .base import Service

M = TypeVar("M", bound=BaseModel)


def _build(model: type[M], **fields: Any) -> M:
    """Construct a domain model, reporting bad input as a domain error."""
    try:
        return model(**fields)
    except PydanticValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise ValidationError(f"Invalid {model.__name__.lower()}: {messages}") from e


def _require_identity(identity: ResolvedIdentity | None) -> ResolvedIdentity:
    if identity is None:
        raise UnauthenticatedError()
    return identity


class ListService(Service):
    """Domain service for list membership, items, ratings and criteria."""

    def __init__(self, list_repository: TopTenListRepository) -> None:
        """Initialize list service.

        Args:
            list_repository: List repository
        """
        self.list_repository = list_repository

    async def get_list(self, list_id: ListId) -> TopTenList:
        """Load a list.

        Raises:
            NotFoundError: If the list does not exist
        """
        top_ten_list = await self.list_repository.find_by_id(list_id)
        if top_ten_list is None:
            logfire.warn("List not found", list_id=list_id)
            raise NotFoundError("List", list_id)
        return top_ten_list

    async def _get_owned_list(self, list_id: ListId, owner_secret: str | None) -> TopTenList:
        top_ten_list = await self.get_list(list_id)
        if not top_ten_list.verify_owner(owner_secret):
            logfire.warn("Owner secret rejected", list_id=list_id)
            raise UnauthorizedError(list_id)
        return top_ten_list

    async def _get_list_as_member(
        self, list_id: ListId, identity: ResolvedIdentity | None
    ) -> tuple[TopTenList, ResolvedIdentity]:
        identity = _require_identity(identity)
        top_ten_list = await self.get_list(list_id)
        if not top_ten_list.has_member(identity.user_id):
            logfire.warn(
                "Member action by non-member", list_id=list_id, user_id=identity.user_id
            )
            raise NotAMemberError(list_id, identity.user_id)
        return top_ten_list, identity

    async def create_list(
        self,
        identity: ResolvedIdentity | None,
        name: str,
        criteria: Sequence[str],
        link_token: bool = False,
    ) -> TopTenList:
        """Create a list owned by the caller.

        The creator becomes the first member. The returned aggregate carries
        the freshly minted owner secret; it must be handed to the creator
        once and never shown again.

        Args:
            identity: Resolved caller
            name: List name
            criteria: Initial criterion names
            link_token: Mint a per-list member token for the creator

        Returns:
            The saved list

        Raises:
            UnauthenticatedError: If the caller is unknown
            ConflictError: If two criterion names are equal ignoring case
            ValidationError: If a name is empty or too long
        """
        identity = _require_identity(identity)
        with logfire.span(
            "list_service.create_list", user_id=identity.user_id, criteria=len(criteria)
        ):
            criterion_records: list[Criterion] = []
            seen: set[str] = set()
            for criterion_name in criteria:
                criterion = _build(
                    Criterion, id=new_criterion_id(), name=criterion_name
                )
                if criterion.name.key in seen:
                    raise ConflictError(
                        f"Duplicate criterion name: {criterion.name}"
                    )
                seen.add(criterion.name.key)
                criterion_records.append(criterion)

            creator = _build(
                User,
                id=identity.user_id,
                display_name=identity.display_name,
                email=identity.email,
                avatar_url=identity.avatar_url,
                user_token=new_secret() if link_token else None,
            )
            top_ten_list = _build(
                TopTenList,
                id=new_list_id(),
                name=name.strip(),
                criteria=criterion_records,
                users=[creator],
                owner_id=identity.user_id,
                owner_secret=new_secret(),
            )

            # Dangling index entries are skipped on read
            await self.list_repository.add_list_for_user(identity.user_id, top_ten_list.id)
            saved = await self.list_repository.save(top_ten_list)
            logfire.info("List created", list_id=saved.id, user_id=identity.user_id)
            return saved

    async def join_list(
        self,
        list_id: ListId,
        identity: ResolvedIdentity | None,
        display_name: str | None = None,
        link_token: bool = False,
    ) -> User:
        """Add the caller to a list's members.

        Joining twice returns the existing member and restores its index
        entry if an earlier join failed to write it.

        Args:
            list_id: List to join
            identity: Resolved caller
            display_name: Name to show instead of the identity's own
            link_token: Mint a per-list member token for cross-device use

        Returns:
            The member record

        Raises:
            UnauthenticatedError: If the caller is unknown
            NotFoundError: If the list does not exist
        """
        identity = _require_identity(identity)
        with logfire.span("list_service.join_list", list_id=list_id, user_id=identity.user_id):
            top_ten_list = await self.get_list(list_id)

            existing = top_ten_list.find_user(identity.user_id)
            if existing:
                await self.list_repository.add_list_for_user(identity.user_id, list_id)
                logfire.info("Already a member", list_id=list_id, user_id=identity.user_id)
                return existing

            member = _build(
                User,
                id=identity.user_id,
                display_name=(display_name or identity.display_name).strip(),
                email=identity.email,
                avatar_url=identity.avatar_url,
                user_token=new_secret() if link_token else None,
            )
            await self.list_repository.add_list_for_user(identity.user_id, list_id)
            await self.list_repository.save(
                top_ten_list.model_copy(update={"users": [*top_ten_list.users, member]})
            )
            logfire.info("Member joined", list_id=list_id, user_id=identity.user_id)
            return member

    async def add_item(
        self, list_id: ListId, identity: ResolvedIdentity | None, name: str
    ) -> Item:
        """Add an item to an unlocked list.

        Raises:
            UnauthenticatedError: If the caller is unknown
            NotFoundError: If the list does not exist
            NotAMemberError: If the caller has not joined
            ListLockedError: If the list is locked
            ValidationError: If the name is empty or too long
        """
        with logfire.span("list_service.add_item", list_id=list_id):
            top_ten_list, identity = await self._get_list_as_member(list_id, identity)
            if top_ten_list.is_locked:
                logfire.warn("Item added to locked list", list_id=list_id)
                raise ListLockedError(list_id)

            item = _build(
                Item, id=new_item_id(), name=name.strip(), added_by=identity.user_id
            )
            await self.list_repository.save(
                top_ten_list.model_copy(update={"items": [*top_ten_list.items, item]})
            )
            logfire.info("Item added", list_id=list_id, item_id=item.id)
            return item

    async def rate_item(
        self,
        list_id: ListId,
        identity: ResolvedIdentity | None,
        item_id: ItemId,
        criterion_id: CriterionId,
        value: int,
    ) -> Rating:
        """Rate an item on one criterion, replacing the caller's earlier rating.

        Locking does not block rating.

        Raises:
            UnauthenticatedError: If the caller is unknown
            NotFoundError: If the list, item or criterion does not exist
            NotAMemberError: If the caller has not joined
            ValidationError: If value is not 1-5 or -1
        """
        with logfire.span(
            "list_service.rate_item",
            list_id=list_id,
            item_id=item_id,
            criterion_id=criterion_id,
            value=value,
        ):
            top_ten_list, identity = await self._get_list_as_member(list_id, identity)

            item = top_ten_list.find_item(item_id)
            if item is None:
                raise NotFoundError("Item", item_id)
            if top_ten_list.find_criterion(criterion_id) is None:
                raise NotFoundError("Criterion", criterion_id)

            rating = _build(
                Rating, user_id=identity.user_id, criterion_id=criterion_id, value=value
            )
            rated = item.with_rating(rating)
            items = [rated if i.id == item_id else i for i in top_ten_list.items]
            await self.list_repository.save(top_ten_list.model_copy(update={"items": items}))
            return rating

    async def remove_item(
        self, list_id: ListId, item_id: ItemId, owner_secret: str | None
    ) -> None:
        """Delete an item (owner only).

        Raises:
            NotFoundError: If the list or item does not exist
            UnauthorizedError: If the owner secret does not match
        """
        with logfire.span("list_service.remove_item", list_id=list_id, item_id=item_id):
            top_ten_list = await self._get_owned_list(list_id, owner_secret)
            if top_ten_list.find_item(item_id) is None:
                raise NotFoundError("Item", item_id)

            items = [i for i in top_ten_list.items if i.id != item_id]
            await self.list_repository.save(top_ten_list.model_copy(update={"items": items}))
            logfire.info("Item removed", list_id=list_id, item_id=item_id)

    async def toggle_lock(self, list_id: ListId, owner_secret: str | None) -> bool:
        """Flip the lock (owner only).

        Returns:
            The new lock state

        Raises:
            NotFoundError: If the list does not exist
            UnauthorizedError: If the owner secret does not match
        """
        with logfire.span("list_service.toggle_lock", list_id=list_id):
            top_ten_list = await self._get_owned_list(list_id, owner_secret)
            is_locked = not top_ten_list.is_locked
            await self.list_repository.save(
                top_ten_list.model_copy(update={"is_locked": is_locked})
            )
            logfire.info("Lock toggled", list_id=list_id, is_locked=is_locked)
            return is_locked

    async def add_criterion(
        self, list_id: ListId, name: str, owner_secret: str | None
    ) -> Criterion:
        """Add a criterion (owner only).

        Raises:
            NotFoundError: If the list does not exist
            UnauthorizedError: If the owner secret does not match
            ConflictError: If a criterion with the same name (ignoring case)
                already exists
            ValidationError: If the name is empty or too long
        """
        with logfire.span("list_service.add_criterion", list_id=list_id):
            top_ten_list = await self._get_owned_list(list_id, owner_secret)

            criterion = _build(Criterion, id=new_criterion_id(), name=name)
            if top_ten_list.has_criterion_named(criterion.name):
                logfire.warn(
                    "Duplicate criterion name", list_id=list_id, name=str(criterion.name)
                )
                raise ConflictError("A criterion with this name already exists")
            while top_ten_list.find_criterion(criterion.id) is not None:
                criterion = criterion.model_copy(update={"id": new_criterion_id()})

            await self.list_repository.save(
                top_ten_list.model_copy(
                    update={"criteria": [*top_ten_list.criteria, criterion]}
                )
            )
            logfire.info("Criterion added", list_id=list_id, criterion_id=criterion.id)
            return criterion

    async def remove_criterion(
        self, list_id: ListId, criterion_id: CriterionId, owner_secret: str | None
    ) -> None:
        """Remove a criterion and every rating on it (owner only).

        Removing the last criterion is allowed.

        Raises:
            NotFoundError: If the list or criterion does not exist
            UnauthorizedError: If the owner secret does not match
        """
        with logfire.span(
            "list_service.remove_criterion", list_id=list_id, criterion_id=criterion_id
        ):
            top_ten_list = await self._get_owned_list(list_id, owner_secret)
            if top_ten_list.find_criterion(criterion_id) is None:
                raise NotFoundError("Criterion", criterion_id)

            criteria = [c for c in top_ten_list.criteria if c.id != criterion_id]
            items = [i.without_criterion(criterion_id) for i in top_ten_list.items]
            await self.list_repository.save(
                top_ten_list.model_copy(update={"criteria": criteria, "items": items})
            )
            logfire.info("Criterion removed", list_id=list_id, criterion_id=criterion_id)

    async def get_user_lists(self, identity: ResolvedIdentity | None) -> list[TopTenList]:
        """Load every list the caller has created or joined.

        Index entries whose list no longer exists are skipped.

        Raises:
            UnauthenticatedError: If the caller is unknown
        """
        identity = _require_identity(identity)
        with logfire.span("list_service.get_user_lists", user_id=identity.user_id):
            lists = []
            for list_id in await self.list_repository.find_list_ids_for_user(
                identity.user_id
            ):
                top_ten_list = await self.list_repository.find_by_id(list_id)
                if top_ten_list is None:
                    logfire.warn("Membership index points to missing list", list_id=list_id)
                    continue
                if top_ten_list.has_member(identity.user_id) or top_ten_list.is_owned_by(
                    identity.user_id
                ):
                    lists.append(top_ten_list)
            return lists
