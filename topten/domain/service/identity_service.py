"""Identity domain service.

The list logic only ever sees a ``ResolvedIdentity``. Which strategy produced
it (anonymous cookie, per-list member token, external provider session) is
decided once by configuration and hidden behind ``IdentityResolver``.
"""

from typing import ClassVar

import logfire

from topten.domain.error import ForbiddenError, ValidationError
from topten.domain.model.user import User
from topten.domain.value import IdentityMode, ListId, ResolvedIdentity
from topten.domain.value.common import ValueObject

from .base import Service

OWNER_COOKIE_PREFIX = "topten_owner_"


class RequestContext(ValueObject):
    """What an identity resolver may look at. Header names are lowercase."""

    list_id: ListId | None = None
    cookies: dict[str, str] = {}
    headers: dict[str, str] = {}


class IssuedCredential(ValueObject):
    """A credential the caller must keep, delivered as a cookie."""

    name: str
    value: str
    max_age: int  # seconds


class IdentityResolver:
    """Generic identity resolution interface for all strategies."""

    mode: ClassVar[IdentityMode]

    # Whether joining mints a per-list member token
    links_members: ClassVar[bool] = False

    async def resolve(self, context: RequestContext) -> ResolvedIdentity | None:
        """Work out who is making the request.

        Args:
            context: Cookies, headers and the list being addressed

        Returns:
            The caller, or None if unauthenticated
        """
        raise NotImplementedError

    def new_identity(self, display_name: str) -> ResolvedIdentity | None:
        """Mint an identity for a first-time participant.

        Returns:
            A new identity, or None if this strategy cannot mint identities
        """
        return None

    def identity_credential(self, identity: ResolvedIdentity) -> IssuedCredential | None:
        """Credential recognizing the caller on every list, if the strategy has one."""
        return None

    def credential_for(
        self, list_id: ListId, identity: ResolvedIdentity, member: User
    ) -> IssuedCredential | None:
        """Credential that lets the caller be recognized on later requests.

        Returns:
            The credential, or None when the strategy needs none
        """
        return None


class IdentityService(Service):
    """Domain service for recognizing callers and issuing credentials."""

    def __init__(self, resolver: IdentityResolver, cookie_max_age_days: int) -> None:
        """Initialize identity service.

        Args:
            resolver: Configured identity strategy
            cookie_max_age_days: Lifetime of issued credential cookies
        """
        self.resolver = resolver
        self.cookie_max_age = cookie_max_age_days * 24 * 60 * 60

    @property
    def mode(self) -> IdentityMode:
        return self.resolver.mode

    @property
    def links_members(self) -> bool:
        return self.resolver.links_members

    async def resolve(self, context: RequestContext) -> ResolvedIdentity | None:
        """Resolve the caller."""
        with logfire.span("identity_service.resolve", mode=self.mode.value):
            identity = await self.resolver.resolve(context)
            if identity is None:
                logfire.debug("Caller not identified", list_id=context.list_id)
            return identity

    def ensure_identity(
        self, identity: ResolvedIdentity | None, display_name: str | None
    ) -> ResolvedIdentity | None:
        """Return the caller's identity, minting one for a newcomer who gave a
        display name when the strategy allows it."""
        if identity is not None:
            return identity
        if not display_name or not display_name.strip():
            return None
        minted = self.resolver.new_identity(display_name.strip())
        if minted:
            logfire.info("Identity minted", mode=self.mode.value, user_id=minted.user_id)
        return minted

    def issue_identity(
        self, display_name: str
    ) -> tuple[ResolvedIdentity, IssuedCredential]:
        """Mint a standalone identity and the credential that carries it.

        Raises:
            ValidationError: If the display name is blank or too long
            ForbiddenError: If the strategy cannot issue standalone identities
        """
        name = display_name.strip()
        if not name or len(name) > 100:
            raise ValidationError("Display name must be 1-100 characters")
        identity = self.resolver.new_identity(name)
        credential = self.resolver.identity_credential(identity) if identity else None
        if identity is None or credential is None:
            raise ForbiddenError(
                f"Identity mode {self.mode.value} does not issue standalone identities"
            )
        logfire.info("Identity issued", mode=self.mode.value, user_id=identity.user_id)
        return identity, credential

    def credential_for(
        self, list_id: ListId, identity: ResolvedIdentity, member: User
    ) -> IssuedCredential | None:
        """Credential for a member who just joined or created a list."""
        return self.resolver.credential_for(list_id, identity, member)

    def owner_credential(self, list_id: ListId, owner_secret: str) -> IssuedCredential:
        """Cookie carrying a list's owner secret back to its creator."""
        return IssuedCredential(
            name=f"{OWNER_COOKIE_PREFIX}{list_id}",
            value=owner_secret,
            max_age=self.cookie_max_age,
        )

    @staticmethod
    def owner_secret_from(context: RequestContext) -> str | None:
        """Owner secret presented in the request header or owner cookie."""
        secret = context.headers.get("x-owner-secret")
        if secret:
            return secret
        if context.list_id is None:
            return None
        return context.cookies.get(f"{OWNER_COOKIE_PREFIX}{context.list_id}")
