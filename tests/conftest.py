"""Test configuration and fixtures."""

from topten.domain.model import Criterion, Item, Rating, TopTenList, User
from topten.domain.value import (
    CriterionId,
    CriterionName,
    IdentityMode,
    ItemId,
    ResolvedIdentity,
    UserId,
)


def make_identity(
    user_id: str = "alice",
    display_name: str | None = None,
    mode: IdentityMode = IdentityMode.ANONYMOUS_COOKIE,
) -> ResolvedIdentity:
    """Helper to build a resolved caller identity."""
    return ResolvedIdentity(
        user_id=UserId(user_id),
        display_name=display_name or user_id.capitalize(),
        mode=mode,
    )


def make_criterion(criterion_id: str, name: str) -> Criterion:
    """Helper to build a criterion."""
    return Criterion(id=CriterionId(criterion_id), name=CriterionName(name))


def make_item(
    item_id: str = "item-1",
    name: str = "Test Item",
    ratings: list[tuple[str, str, int]] | None = None,
) -> Item:
    """Helper to build an item.

    Args:
        item_id: Item id
        name: Item name
        ratings: (user_id, criterion_id, value) triples
    """
    return Item(
        id=ItemId(item_id),
        name=name,
        added_by=UserId("alice"),
        ratings=[
            Rating(user_id=UserId(u), criterion_id=CriterionId(c), value=v)
            for u, c, v in ratings or []
        ],
    )


def make_list(
    criteria: list[Criterion] | None = None,
    items: list[Item] | None = None,
    users: list[User] | None = None,
    owner_secret: str = "owner-secret",
    is_locked: bool = False,
) -> TopTenList:
    """Helper to build a list aggregate owned by ``alice``."""
    return TopTenList(
        id="list-1",
        name="Best Pizza",
        criteria=criteria or [],
        items=items or [],
        users=users or [User(id=UserId("alice"), display_name="Alice")],
        owner_id=UserId("alice"),
        owner_secret=owner_secret,
        is_locked=is_locked,
    )
