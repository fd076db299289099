"""Unit tests for IssueIdentityUseCase."""

import pytest

from topten.adapter.identity import AnonymousCookieIdentityResolver
from topten.application.usecase.identity import (
    IssueIdentityRequest,
    IssueIdentityUseCase,
)
from topten.config import IdentitySettings
from topten.domain.service import IdentityService
from topten.domain.value import ErrorKind
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestIssueIdentityUseCase:
    """Tests for IssueIdentityUseCase."""

    @pytest.mark.asyncio
    async def test_anonymous_mode_issues_cookie(self):
        """Anonymous cookie mode issues an identity with its cookie."""
        use_case = IssueIdentityUseCase(
            IdentityService(
                AnonymousCookieIdentityResolver(IdentitySettings(cookie_secret="s")),
                cookie_max_age_days=365,
            )
        )

        result = await use_case.execute(IssueIdentityRequest(display_name="Carol"))

        assert result.success is True
        assert result.display_name == "Carol"
        assert result.user_id
        assert result.credential is not None
        assert result.credential.name == "topten_identity"

    @pytest.mark.asyncio
    async def test_mode_without_standalone_identities(self, unit_env):
        """Resolvers without a cross-list credential refuse."""
        use_case = await unit_env.get(IssueIdentityUseCase)

        result = await use_case.execute(IssueIdentityRequest(display_name="Carol"))

        assert result.success is False
        assert result.error_kind == ErrorKind.FORBIDDEN
        assert result.credential is None
