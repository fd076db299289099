"""Anonymous cookie identity.

A participant picks a display name, gets a locally generated id, and is
recognized afterwards by a signed cookie holding both.
"""

import logfire

from topten.config import IdentitySettings
from topten.domain.model.user import User
from topten.domain.service.identity_service import (
    IdentityResolver,
    IssuedCredential,
    RequestContext,
)
from topten.domain.value import IdentityMode, ListId, ResolvedIdentity, UserId, new_user_id
from topten.util.jwt import JWTError, create_identity_token, verify_identity_token


class AnonymousCookieIdentityResolver(IdentityResolver):
    """Identity from a signed ``topten_identity`` cookie."""

    mode = IdentityMode.ANONYMOUS_COOKIE

    def __init__(self, settings: IdentitySettings) -> None:
        """Initialize resolver.

        Args:
            settings: Identity settings with the cookie signing key
        """
        self.settings = settings

    async def resolve(self, context: RequestContext) -> ResolvedIdentity | None:
        """Read and verify the identity cookie."""
        token = context.cookies.get(self.settings.identity_cookie_name)
        if not token:
            return None
        try:
            payload = verify_identity_token(token, self.settings)
        except JWTError as e:
            logfire.warn("Identity cookie rejected", error=str(e))
            return None
        return ResolvedIdentity(
            user_id=UserId(payload.user_id),
            display_name=payload.display_name,
            mode=self.mode,
        )

    def new_identity(self, display_name: str) -> ResolvedIdentity:
        """Mint a local identity."""
        return ResolvedIdentity(
            user_id=new_user_id(), display_name=display_name, mode=self.mode
        )

    def identity_credential(self, identity: ResolvedIdentity) -> IssuedCredential:
        """Signed cookie carrying the identity. Valid for every list."""
        return IssuedCredential(
            name=self.settings.identity_cookie_name,
            value=create_identity_token(
                identity.user_id, identity.display_name, self.settings
            ),
            max_age=self.settings.cookie_max_age_days * 24 * 60 * 60,
        )

    def credential_for(
        self, list_id: ListId, identity: ResolvedIdentity, member: User
    ) -> IssuedCredential:
        """Same cookie whichever list was joined."""
        return self.identity_credential(identity)
