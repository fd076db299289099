"""Unit tests for CreateListUseCase."""

import pytest

from topten.application.usecase.base import STORAGE_FAILURE_MESSAGE
from topten.application.usecase.list import (
    CreateListRequest,
    CreateListUseCase,
    GetListRequest,
    GetListUseCase,
)
from topten.domain.error import StorageError
from topten.domain.repository import KeyValueStore
from topten.domain.value import ErrorKind
from tests.conftest import make_identity
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateListUseCase:
    """Tests for CreateListUseCase."""

    @pytest.mark.asyncio
    async def test_returns_owner_secret_once_with_owner_cookie(self, unit_env):
        """The creator gets the secret in the result and as a cookie."""
        use_case = await unit_env.get(CreateListUseCase)

        result = await use_case.execute(
            CreateListRequest(
                name="Best Pizza",
                criteria=["Taste", "Price"],
                identity=make_identity("alice"),
            )
        )

        assert result.success is True
        assert result.list_id
        assert result.owner_secret
        assert result.user_id == "alice"
        owner_cookie = result.credentials[0]
        assert owner_cookie.name == f"topten_owner_{result.list_id}"
        assert owner_cookie.value == result.owner_secret

    @pytest.mark.asyncio
    async def test_list_view_never_contains_owner_secret(self, unit_env):
        """Reading the list back does not leak the secret."""
        create = await unit_env.get(CreateListUseCase)
        get = await unit_env.get(GetListUseCase)
        created = await create.execute(
            CreateListRequest(
                name="Best Pizza", criteria=["Taste"], identity=make_identity("alice")
            )
        )

        view = await get.execute(GetListRequest(list_id=created.list_id))

        assert view.success is True
        assert created.owner_secret not in view.model_dump_json()

    @pytest.mark.asyncio
    async def test_newcomer_with_display_name(self, unit_env):
        """A newcomer who gives a name gets an identity minted."""
        use_case = await unit_env.get(CreateListUseCase)

        result = await use_case.execute(
            CreateListRequest(name="Best Pizza", criteria=[], display_name="Carol")
        )

        assert result.success is True
        assert result.user_id and len(result.user_id) == 16

    @pytest.mark.asyncio
    async def test_unauthenticated(self, unit_env):
        """Without identity or name the result is an unauthenticated failure."""
        use_case = await unit_env.get(CreateListUseCase)

        result = await use_case.execute(CreateListRequest(name="Best Pizza"))

        assert result.success is False
        assert result.error_kind == ErrorKind.UNAUTHENTICATED
        assert result.list_id is None
        assert result.owner_secret is None

    @pytest.mark.asyncio
    async def test_duplicate_criteria_conflict(self, unit_env):
        """Duplicate criterion names are reported as a conflict."""
        use_case = await unit_env.get(CreateListUseCase)

        result = await use_case.execute(
            CreateListRequest(
                name="Best Pizza",
                criteria=["Taste", "taste"],
                identity=make_identity("alice"),
            )
        )

        assert result.success is False
        assert result.error_kind == ErrorKind.CONFLICT

    @pytest.mark.asyncio
    async def test_storage_failure_reported_generically(self, unit_env, monkeypatch):
        """Store failures become a generic storage error."""
        use_case = await unit_env.get(CreateListUseCase)
        store = await unit_env.get(KeyValueStore)

        async def failing_set(key, value):
            raise StorageError("disk full at /var/data")

        monkeypatch.setattr(store, "set", failing_set)

        result = await use_case.execute(
            CreateListRequest(
                name="Best Pizza", criteria=["Taste"], identity=make_identity("alice")
            )
        )

        assert result.success is False
        assert result.error_kind == ErrorKind.STORAGE
        assert result.error == STORAGE_FAILURE_MESSAGE
