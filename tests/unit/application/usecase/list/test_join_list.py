"""Unit tests for JoinListUseCase and GetUserListsUseCase."""

import pytest

from topten.application.usecase.list import (
    GetUserListsRequest,
    GetUserListsUseCase,
    JoinListRequest,
    JoinListUseCase,
)
from topten.domain.service import ListService
from topten.domain.value import ErrorKind
from tests.conftest import make_identity
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = make_identity("alice")
BOB = make_identity("bob")


class TestJoinListUseCase:
    """Tests for JoinListUseCase."""

    @pytest.mark.asyncio
    async def test_join(self, unit_env):
        """Joining returns the member record."""
        service = await unit_env.get(ListService)
        use_case = await unit_env.get(JoinListUseCase)
        top_ten_list = await service.create_list(ALICE, "Best Pizza", ["Taste"])

        result = await use_case.execute(
            JoinListRequest(list_id=top_ten_list.id, identity=BOB)
        )

        assert result.success is True
        assert result.user_id == "bob"
        assert result.display_name == "Bob"

    @pytest.mark.asyncio
    async def test_join_twice_returns_same_member(self, unit_env):
        """The second join is a no-op."""
        service = await unit_env.get(ListService)
        use_case = await unit_env.get(JoinListUseCase)
        top_ten_list = await service.create_list(ALICE, "Best Pizza", ["Taste"])
        request = JoinListRequest(list_id=top_ten_list.id, identity=BOB)

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first.user_id == second.user_id
        saved = await service.get_list(top_ten_list.id)
        assert len(saved.users) == 2

    @pytest.mark.asyncio
    async def test_newcomer_joins_with_display_name(self, unit_env):
        """A caller without identity can join by giving a name."""
        service = await unit_env.get(ListService)
        use_case = await unit_env.get(JoinListUseCase)
        top_ten_list = await service.create_list(ALICE, "Best Pizza", ["Taste"])

        result = await use_case.execute(
            JoinListRequest(list_id=top_ten_list.id, display_name="Carol")
        )

        assert result.success is True
        assert result.display_name == "Carol"

    @pytest.mark.asyncio
    async def test_missing_list(self, unit_env):
        """Joining an unknown list is a not-found failure."""
        use_case = await unit_env.get(JoinListUseCase)

        result = await use_case.execute(JoinListRequest(list_id="nope", identity=BOB))

        assert result.success is False
        assert result.error_kind == ErrorKind.NOT_FOUND


class TestGetUserListsUseCase:
    """Tests for GetUserListsUseCase."""

    @pytest.mark.asyncio
    async def test_summaries(self, unit_env):
        """Each list the user belongs to is summarized."""
        service = await unit_env.get(ListService)
        use_case = await unit_env.get(GetUserListsUseCase)
        pizza = await service.create_list(ALICE, "Best Pizza", ["Taste"])
        burgers = await service.create_list(BOB, "Best Burgers", ["Taste"])
        await service.join_list(burgers.id, ALICE)
        await service.add_item(pizza.id, ALICE, "Margherita")

        result = await use_case.execute(GetUserListsRequest(identity=ALICE))

        assert result.success is True
        summaries = {s.id: s for s in result.lists}
        assert summaries[pizza.id].is_owner is True
        assert summaries[pizza.id].item_count == 1
        assert summaries[burgers.id].is_owner is False
        assert summaries[burgers.id].member_count == 2

    @pytest.mark.asyncio
    async def test_unauthenticated(self, unit_env):
        """Anonymous callers get an unauthenticated failure."""
        use_case = await unit_env.get(GetUserListsUseCase)

        result = await use_case.execute(GetUserListsRequest())

        assert result.success is False
        assert result.error_kind == ErrorKind.UNAUTHENTICATED
