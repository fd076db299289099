"""Identity infrastructure providers."""

from dishka import Scope, provide

from topten.adapter.identity import (
    AnonymousCookieIdentityResolver,
    ExternalProviderIdentityResolver,
    TokenLinkedIdentityResolver,
)
from topten.config import IdentitySettings
from topten.domain.repository import TopTenListRepository
from topten.domain.service import IdentityResolver
from topten.domain.value import IdentityMode
from topten.util.di.base import ProviderBase
from topten.util.error import ConfigurationError


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider, strategy chosen by ``IDENTITY__MODE``."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_resolver(
        self,
        identity_settings: IdentitySettings,
        list_repository: TopTenListRepository,
    ) -> IdentityResolver:
        """Provide the configured identity resolver."""
        match identity_settings.mode:
            case IdentityMode.ANONYMOUS_COOKIE:
                return AnonymousCookieIdentityResolver(identity_settings)
            case IdentityMode.TOKEN_LINKED:
                return TokenLinkedIdentityResolver(list_repository, identity_settings)
            case IdentityMode.EXTERNAL_PROVIDER:
                return ExternalProviderIdentityResolver(identity_settings)
        raise ConfigurationError(f"Unknown identity mode: {identity_settings.mode}")
