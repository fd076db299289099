"""Per-list member token identity.

Joining a list mints a secret token for the new member. Presenting that token
(cookie or header) on any device is how the member is recognized again.
"""

import logfire

from topten.config import IdentitySettings
from topten.domain.model.user import User
from topten.domain.repository import TopTenListRepository
from topten.domain.service.identity_service import (
    IdentityResolver,
    IssuedCredential,
    RequestContext,
)
from topten.domain.value import IdentityMode, ListId, ResolvedIdentity, new_user_id

USER_COOKIE_PREFIX = "topten_user_"
USER_TOKEN_HEADER = "x-user-token"


class TokenLinkedIdentityResolver(IdentityResolver):
    """Identity from a per-list member token."""

    mode = IdentityMode.TOKEN_LINKED
    links_members = True

    def __init__(
        self, list_repository: TopTenListRepository, settings: IdentitySettings
    ) -> None:
        """Initialize resolver.

        Args:
            list_repository: Repository to look members up in
            settings: Identity settings
        """
        self.list_repository = list_repository
        self.settings = settings

    async def recognize_member(self, list_id: ListId, user_token: str) -> User | None:
        """Find the member a per-list token was issued to.

        Returns:
            The member, or None if the list or token is unknown
        """
        top_ten_list = await self.list_repository.find_by_id(list_id)
        if top_ten_list is None:
            return None
        return top_ten_list.find_user_by_token(user_token)

    async def resolve(self, context: RequestContext) -> ResolvedIdentity | None:
        """Find the member whose token the caller presents for this list."""
        if context.list_id is None:
            return None
        token = context.headers.get(USER_TOKEN_HEADER) or context.cookies.get(
            f"{USER_COOKIE_PREFIX}{context.list_id}"
        )
        if not token:
            return None

        member = await self.recognize_member(context.list_id, token)
        if member is None:
            logfire.warn("Unknown member token", list_id=context.list_id)
            return None
        return ResolvedIdentity(
            user_id=member.id,
            display_name=member.display_name,
            email=member.email,
            avatar_url=member.avatar_url,
            mode=self.mode,
        )

    def new_identity(self, display_name: str) -> ResolvedIdentity:
        """Mint a local identity for a newcomer."""
        return ResolvedIdentity(
            user_id=new_user_id(), display_name=display_name, mode=self.mode
        )

    def credential_for(
        self, list_id: ListId, identity: ResolvedIdentity, member: User
    ) -> IssuedCredential | None:
        """Cookie holding the member's token for this list."""
        if not member.user_token:
            return None
        return IssuedCredential(
            name=f"{USER_COOKIE_PREFIX}{list_id}",
            value=member.user_token,
            max_age=self.settings.cookie_max_age_days * 24 * 60 * 60,
        )
