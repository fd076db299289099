"""External identity provider.

The provider authenticates users and hands the browser a signed session
token. This resolver only verifies that token; it never mints identities.
"""

import logfire

from topten.config import IdentitySettings
from topten.domain.service.identity_service import IdentityResolver, RequestContext
from topten.domain.value import IdentityMode, ResolvedIdentity, UserId
from topten.util.jwt import JWTError, ProviderSessionPayload, verify_provider_token

SESSION_COOKIE = "__session"


def display_name_for(payload: ProviderSessionPayload) -> str:
    """Best available human name: full name, then username, then email."""
    return payload.name or payload.username or payload.email or "User"


class ExternalProviderIdentityResolver(IdentityResolver):
    """Identity from a provider session token (bearer header or cookie)."""

    mode = IdentityMode.EXTERNAL_PROVIDER

    def __init__(self, settings: IdentitySettings) -> None:
        """Initialize resolver.

        Args:
            settings: Identity settings with the provider verification key
        """
        self.settings = settings

    async def resolve(self, context: RequestContext) -> ResolvedIdentity | None:
        """Verify the provider session and map its claims."""
        token = None
        authorization = context.headers.get("authorization", "")
        if authorization.lower().startswith("bearer "):
            token = authorization[7:].strip()
        if not token:
            token = context.cookies.get(SESSION_COOKIE)
        if not token:
            return None

        try:
            payload = verify_provider_token(token, self.settings)
        except JWTError as e:
            logfire.warn("Provider session rejected", error=str(e))
            return None

        return ResolvedIdentity(
            user_id=UserId(payload.sub),
            display_name=display_name_for(payload),
            email=payload.email,
            avatar_url=payload.picture,
            mode=self.mode,
        )
