"""Unit tests for ListService."""

import pytest

from topten.domain.error import (
    ConflictError,
    ListLockedError,
    NotAMemberError,
    NotFoundError,
    StorageError,
    UnauthenticatedError,
    UnauthorizedError,
    ValidationError,
)
from topten.domain.repository import KeyValueStore, TopTenListRepository
from topten.domain.service import ListService
from topten.domain.value import CriterionId, ItemId, ListId, UserId
from tests.conftest import make_identity
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

ALICE = make_identity("alice")
BOB = make_identity("bob")


async def create_pizza_list(service: ListService, criteria=("Taste", "Price")):
    return await service.create_list(ALICE, "Best Pizza", list(criteria))


class TestCreateList:
    """Tests for create_list."""

    @pytest.mark.asyncio
    async def test_creator_becomes_owner_and_member(self, unit_env):
        """Creating a list should make the caller owner and first member."""
        service = await unit_env.get(ListService)

        top_ten_list = await create_pizza_list(service)

        assert top_ten_list.owner_id == "alice"
        assert [u.id for u in top_ten_list.users] == ["alice"]
        assert [c.name.root for c in top_ten_list.criteria] == ["Taste", "Price"]
        assert len(top_ten_list.id) == 12
        assert len(top_ten_list.owner_secret) == 32
        assert top_ten_list.is_locked is False

    @pytest.mark.asyncio
    async def test_saves_list_and_membership_index(self, unit_env):
        """The list and the creator's index entry should be persisted."""
        service = await unit_env.get(ListService)
        repo = await unit_env.get(TopTenListRepository)

        top_ten_list = await create_pizza_list(service)

        assert await repo.find_by_id(top_ten_list.id) == top_ten_list
        assert await repo.find_list_ids_for_user(UserId("alice")) == [top_ten_list.id]

    @pytest.mark.asyncio
    async def test_rejects_case_insensitive_duplicate_criteria(self, unit_env):
        """'Taste' and ' taste ' are the same criterion."""
        service = await unit_env.get(ListService)

        with pytest.raises(ConflictError):
            await service.create_list(ALICE, "Best Pizza", ["Taste", " taste "])

    @pytest.mark.asyncio
    async def test_rejects_empty_criterion_name(self, unit_env):
        """Blank criterion names are invalid."""
        service = await unit_env.get(ListService)

        with pytest.raises(ValidationError):
            await service.create_list(ALICE, "Best Pizza", ["  "])

    @pytest.mark.asyncio
    async def test_rejects_empty_list_name(self, unit_env):
        """Blank list names are invalid."""
        service = await unit_env.get(ListService)

        with pytest.raises(ValidationError):
            await service.create_list(ALICE, "   ", ["Taste"])

    @pytest.mark.asyncio
    async def test_requires_identity(self, unit_env):
        """Anonymous callers cannot create lists."""
        service = await unit_env.get(ListService)

        with pytest.raises(UnauthenticatedError):
            await service.create_list(None, "Best Pizza", ["Taste"])

    @pytest.mark.asyncio
    async def test_link_token_mints_member_token(self, unit_env):
        """In token-linked mode the creator gets a per-list token."""
        service = await unit_env.get(ListService)

        top_ten_list = await service.create_list(
            ALICE, "Best Pizza", ["Taste"], link_token=True
        )

        assert top_ten_list.users[0].user_token
        assert top_ten_list.users[0].user_token != top_ten_list.owner_secret


class TestJoinList:
    """Tests for join_list."""

    @pytest.mark.asyncio
    async def test_join_adds_member_and_index_entry(self, unit_env):
        """Joining should add the caller to users and their index."""
        service = await unit_env.get(ListService)
        repo = await unit_env.get(TopTenListRepository)
        top_ten_list = await create_pizza_list(service)

        member = await service.join_list(top_ten_list.id, BOB)

        assert member.id == "bob"
        assert member.display_name == "Bob"
        saved = await service.get_list(top_ten_list.id)
        assert [u.id for u in saved.users] == ["alice", "bob"]
        assert await repo.find_list_ids_for_user(UserId("bob")) == [top_ten_list.id]

    @pytest.mark.asyncio
    async def test_join_is_idempotent(self, unit_env):
        """Joining twice should leave exactly one member record."""
        service = await unit_env.get(ListService)
        repo = await unit_env.get(TopTenListRepository)
        top_ten_list = await create_pizza_list(service)

        first = await service.join_list(top_ten_list.id, BOB)
        second = await service.join_list(top_ten_list.id, BOB, display_name="Robert")

        assert first == second
        saved = await service.get_list(top_ten_list.id)
        assert [u.id for u in saved.users] == ["alice", "bob"]
        assert await repo.find_list_ids_for_user(UserId("bob")) == [top_ten_list.id]

    @pytest.mark.asyncio
    async def test_display_name_override(self, unit_env):
        """A supplied display name replaces the identity's name."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)

        member = await service.join_list(top_ten_list.id, BOB, display_name=" Robert ")

        assert member.display_name == "Robert"

    @pytest.mark.asyncio
    async def test_join_missing_list(self, unit_env):
        """Joining a list that does not exist fails with NotFound."""
        service = await unit_env.get(ListService)

        with pytest.raises(NotFoundError):
            await service.join_list(ListId("nope"), BOB)


class TestItems:
    """Tests for add_item and remove_item."""

    @pytest.mark.asyncio
    async def test_member_adds_item(self, unit_env):
        """Members can add items to an unlocked list."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)
        await service.join_list(top_ten_list.id, BOB)

        item = await service.add_item(top_ten_list.id, BOB, "  Margherita ")

        assert item.name == "Margherita"
        assert item.added_by == "bob"
        assert len(item.id) == 12
        saved = await service.get_list(top_ten_list.id)
        assert [i.id for i in saved.items] == [item.id]

    @pytest.mark.asyncio
    async def test_non_member_cannot_add_item(self, unit_env):
        """Callers who have not joined are forbidden."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)

        with pytest.raises(NotAMemberError):
            await service.add_item(top_ten_list.id, BOB, "Margherita")

    @pytest.mark.asyncio
    async def test_unauthenticated_cannot_add_item(self, unit_env):
        """Callers without identity are rejected before anything else."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)

        with pytest.raises(UnauthenticatedError):
            await service.add_item(top_ten_list.id, None, "Margherita")

    @pytest.mark.asyncio
    async def test_locked_list_rejects_items_but_accepts_ratings(self, unit_env):
        """Locking blocks new items only."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)
        item = await service.add_item(top_ten_list.id, ALICE, "Margherita")
        await service.toggle_lock(top_ten_list.id, top_ten_list.owner_secret)

        with pytest.raises(ListLockedError):
            await service.add_item(top_ten_list.id, ALICE, "Pepperoni")

        taste = top_ten_list.criteria[0].id
        rating = await service.rate_item(top_ten_list.id, ALICE, item.id, taste, 4)
        assert rating.value == 4

    @pytest.mark.asyncio
    async def test_owner_removes_item(self, unit_env):
        """The owner can remove an item with its ratings."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)
        item = await service.add_item(top_ten_list.id, ALICE, "Margherita")

        await service.remove_item(top_ten_list.id, item.id, top_ten_list.owner_secret)

        saved = await service.get_list(top_ten_list.id)
        assert saved.items == []

    @pytest.mark.asyncio
    async def test_remove_missing_item(self, unit_env):
        """Removing an unknown item fails with NotFound."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)

        with pytest.raises(NotFoundError):
            await service.remove_item(
                top_ten_list.id, ItemId("nope"), top_ten_list.owner_secret
            )


class TestRateItem:
    """Tests for rate_item."""

    @pytest.mark.asyncio
    async def test_rerating_replaces_previous_rating(self, unit_env):
        """Rating 3 then 5 leaves exactly one rating of 5."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)
        item = await service.add_item(top_ten_list.id, ALICE, "Margherita")
        taste = top_ten_list.criteria[0].id

        await service.rate_item(top_ten_list.id, ALICE, item.id, taste, 3)
        await service.rate_item(top_ten_list.id, ALICE, item.id, taste, 5)

        saved = await service.get_list(top_ten_list.id)
        ratings = saved.items[0].ratings
        assert len(ratings) == 1
        assert ratings[0].value == 5

    @pytest.mark.asyncio
    async def test_ratings_from_different_users_coexist(self, unit_env):
        """Each member keeps their own rating per criterion."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)
        await service.join_list(top_ten_list.id, BOB)
        item = await service.add_item(top_ten_list.id, ALICE, "Margherita")
        taste = top_ten_list.criteria[0].id

        await service.rate_item(top_ten_list.id, ALICE, item.id, taste, 3)
        await service.rate_item(top_ten_list.id, BOB, item.id, taste, -1)

        saved = await service.get_list(top_ten_list.id)
        assert {(r.user_id, r.value) for r in saved.items[0].ratings} == {
            ("alice", 3),
            ("bob", -1),
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [0, 6, -2])
    async def test_rejects_out_of_range_values(self, unit_env, value):
        """Only 1-5 and -1 are storable."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)
        item = await service.add_item(top_ten_list.id, ALICE, "Margherita")

        with pytest.raises(ValidationError):
            await service.rate_item(
                top_ten_list.id, ALICE, item.id, top_ten_list.criteria[0].id, value
            )

    @pytest.mark.asyncio
    async def test_unknown_item_or_criterion(self, unit_env):
        """Rating something that does not exist fails with NotFound."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)
        item = await service.add_item(top_ten_list.id, ALICE, "Margherita")

        with pytest.raises(NotFoundError):
            await service.rate_item(
                top_ten_list.id, ALICE, ItemId("nope"), top_ten_list.criteria[0].id, 3
            )
        with pytest.raises(NotFoundError):
            await service.rate_item(
                top_ten_list.id, ALICE, item.id, CriterionId("nope"), 3
            )

    @pytest.mark.asyncio
    async def test_non_member_cannot_rate(self, unit_env):
        """Only members may rate."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)
        item = await service.add_item(top_ten_list.id, ALICE, "Margherita")

        with pytest.raises(NotAMemberError):
            await service.rate_item(
                top_ten_list.id, BOB, item.id, top_ten_list.criteria[0].id, 3
            )


class TestOwnerOperations:
    """Tests for owner-gated operations."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("locked", [False, True])
    @pytest.mark.parametrize("secret", ["wrong-secret", "", None, "é", "clé-secrète"])
    async def test_wrong_secret_is_unauthorized_in_every_state(
        self, unit_env, locked, secret
    ):
        """Every owner-gated operation rejects a wrong or missing secret."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)
        item = await service.add_item(top_ten_list.id, ALICE, "Margherita")
        if locked:
            await service.toggle_lock(top_ten_list.id, top_ten_list.owner_secret)
        criterion_id = top_ten_list.criteria[0].id

        with pytest.raises(UnauthorizedError):
            await service.toggle_lock(top_ten_list.id, secret)
        with pytest.raises(UnauthorizedError):
            await service.remove_item(top_ten_list.id, item.id, secret)
        with pytest.raises(UnauthorizedError):
            await service.add_criterion(top_ten_list.id, "Crust", secret)
        with pytest.raises(UnauthorizedError):
            await service.remove_criterion(top_ten_list.id, criterion_id, secret)

        saved = await service.get_list(top_ten_list.id)
        assert saved.is_locked is locked
        assert len(saved.items) == 1
        assert len(saved.criteria) == 2

    @pytest.mark.asyncio
    async def test_missing_list_is_not_found_before_secret_check(self, unit_env):
        """An unknown list id is reported as NotFound, not Unauthorized."""
        service = await unit_env.get(ListService)

        with pytest.raises(NotFoundError):
            await service.toggle_lock(ListId("nope"), "whatever")

    @pytest.mark.asyncio
    async def test_toggle_lock_flips(self, unit_env):
        """Toggling twice restores the unlocked state."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)

        assert await service.toggle_lock(top_ten_list.id, top_ten_list.owner_secret)
        assert not await service.toggle_lock(top_ten_list.id, top_ten_list.owner_secret)


class TestCriteria:
    """Tests for add_criterion and remove_criterion."""

    @pytest.mark.asyncio
    async def test_add_criterion(self, unit_env):
        """The owner can add a criterion."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)

        criterion = await service.add_criterion(
            top_ten_list.id, " Crust ", top_ten_list.owner_secret
        )

        assert criterion.name.root == "Crust"
        assert len(criterion.id) == 8
        saved = await service.get_list(top_ten_list.id)
        assert [c.name.root for c in saved.criteria] == ["Taste", "Price", "Crust"]

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts_and_leaves_criteria_unchanged(
        self, unit_env
    ):
        """'TASTE' collides with 'Taste'."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)

        with pytest.raises(ConflictError):
            await service.add_criterion(
                top_ten_list.id, "TASTE", top_ten_list.owner_secret
            )

        saved = await service.get_list(top_ten_list.id)
        assert saved.criteria == top_ten_list.criteria

    @pytest.mark.asyncio
    async def test_remove_criterion_cascades_to_ratings(self, unit_env):
        """Removing a criterion drops every rating on it."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)
        await service.join_list(top_ten_list.id, BOB)
        taste, price = (c.id for c in top_ten_list.criteria)
        first = await service.add_item(top_ten_list.id, ALICE, "Margherita")
        second = await service.add_item(top_ten_list.id, BOB, "Pepperoni")
        await service.rate_item(top_ten_list.id, ALICE, first.id, taste, 5)
        await service.rate_item(top_ten_list.id, ALICE, first.id, price, 2)
        await service.rate_item(top_ten_list.id, BOB, second.id, taste, 4)

        await service.remove_criterion(
            top_ten_list.id, taste, top_ten_list.owner_secret
        )

        saved = await service.get_list(top_ten_list.id)
        assert [c.id for c in saved.criteria] == [price]
        for item in saved.items:
            assert all(r.criterion_id != taste for r in item.ratings)
        assert len(saved.items[0].ratings) == 1
        assert saved.items[1].ratings == []

    @pytest.mark.asyncio
    async def test_removing_last_criterion_is_allowed(self, unit_env):
        """A list may end up with no criteria."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service, criteria=("Taste",))

        await service.remove_criterion(
            top_ten_list.id, top_ten_list.criteria[0].id, top_ten_list.owner_secret
        )

        saved = await service.get_list(top_ten_list.id)
        assert saved.criteria == []

    @pytest.mark.asyncio
    async def test_remove_unknown_criterion(self, unit_env):
        """Removing a criterion that does not exist fails with NotFound."""
        service = await unit_env.get(ListService)
        top_ten_list = await create_pizza_list(service)

        with pytest.raises(NotFoundError):
            await service.remove_criterion(
                top_ten_list.id, CriterionId("nope"), top_ten_list.owner_secret
            )


class TestGetUserLists:
    """Tests for get_user_lists."""

    @pytest.mark.asyncio
    async def test_returns_created_and_joined_lists(self, unit_env):
        """Lists appear for their creator and for members who joined."""
        service = await unit_env.get(ListService)
        pizza = await create_pizza_list(service)
        burgers = await service.create_list(BOB, "Best Burgers", ["Taste"])
        await service.join_list(burgers.id, ALICE)

        alice_lists = await service.get_user_lists(ALICE)
        bob_lists = await service.get_user_lists(BOB)

        assert [lst.id for lst in alice_lists] == [pizza.id, burgers.id]
        assert [lst.id for lst in bob_lists] == [burgers.id]

    @pytest.mark.asyncio
    async def test_skips_deleted_lists(self, unit_env):
        """Index entries for lists that no longer exist are ignored."""
        service = await unit_env.get(ListService)
        repo = await unit_env.get(TopTenListRepository)
        pizza = await create_pizza_list(service)
        await repo.delete(pizza.id)

        assert await service.get_user_lists(ALICE) == []

    @pytest.mark.asyncio
    async def test_requires_identity(self, unit_env):
        """Anonymous callers have no lists to show."""
        service = await unit_env.get(ListService)

        with pytest.raises(UnauthenticatedError):
            await service.get_user_lists(None)


async def failing_write(*args, **kwargs):
    raise StorageError("disk full")


class TestFailedWrites:
    """A failed write never leaves a change the caller was told failed."""

    @pytest.mark.asyncio
    async def test_create_list_index_failure_persists_nothing(self, unit_env, monkeypatch):
        service = await unit_env.get(ListService)
        repo = await unit_env.get(TopTenListRepository)
        store = await unit_env.get(KeyValueStore)
        monkeypatch.setattr(repo, "add_list_for_user", failing_write)

        with pytest.raises(StorageError):
            await create_pizza_list(service)

        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_create_list_save_failure_leaves_only_skipped_index(
        self, unit_env, monkeypatch
    ):
        service = await unit_env.get(ListService)
        repo = await unit_env.get(TopTenListRepository)
        monkeypatch.setattr(repo, "save", failing_write)

        with pytest.raises(StorageError):
            await create_pizza_list(service)

        monkeypatch.undo()
        assert await service.get_user_lists(ALICE) == []

    @pytest.mark.asyncio
    async def test_join_index_failure_then_retry(self, unit_env, monkeypatch):
        """A join whose index write failed is not applied; retrying works."""
        service = await unit_env.get(ListService)
        repo = await unit_env.get(TopTenListRepository)
        top_ten_list = await create_pizza_list(service)
        monkeypatch.setattr(repo, "add_list_for_user", failing_write)

        with pytest.raises(StorageError):
            await service.join_list(top_ten_list.id, BOB)

        assert not (await service.get_list(top_ten_list.id)).has_member(UserId("bob"))

        monkeypatch.undo()
        await service.join_list(top_ten_list.id, BOB)

        assert await repo.find_list_ids_for_user(UserId("bob")) == [top_ten_list.id]
        assert [l.id for l in await service.get_user_lists(BOB)] == [top_ten_list.id]

    @pytest.mark.asyncio
    async def test_rejoin_restores_missing_index_entry(self, unit_env):
        """An existing member missing from the index is re-indexed on join."""
        service = await unit_env.get(ListService)
        repo = await unit_env.get(TopTenListRepository)
        top_ten_list = await create_pizza_list(service)
        await service.join_list(top_ten_list.id, BOB)
        store = await unit_env.get(KeyValueStore)
        await store.delete("user_lists:bob")

        await service.join_list(top_ten_list.id, BOB)

        assert await repo.find_list_ids_for_user(UserId("bob")) == [top_ten_list.id]
