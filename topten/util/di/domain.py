"""Domain layer DI providers."""

from dishka import Scope, provide

from topten.config import IdentitySettings
from topten.domain.repository import TopTenListRepository
from topten.domain.service import (
    IdentityResolver,
    IdentityService,
    ListService,
    RankingService,
)
from topten.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; the store and repository behind them
    live for the whole application.
    """

    scope = Scope.REQUEST

    @provide
    def get_list_service(self, list_repository: TopTenListRepository) -> ListService:
        """Provide list domain service."""
        return ListService(list_repository=list_repository)

    @provide
    def get_ranking_service(self) -> RankingService:
        """Provide ranking domain service."""
        return RankingService()

    @provide
    def get_identity_service(
        self, resolver: IdentityResolver, identity_settings: IdentitySettings
    ) -> IdentityService:
        """Provide identity domain service backed by the configured resolver."""
        return IdentityService(
            resolver=resolver,
            cookie_max_age_days=identity_settings.cookie_max_age_days,
        )
