"""Identity resolver implementations."""

from .anonymous import AnonymousCookieIdentityResolver
from .external import ExternalProviderIdentityResolver
from .token_linked import TokenLinkedIdentityResolver

__all__ = [
    "AnonymousCookieIdentityResolver",
    "ExternalProviderIdentityResolver",
    "TokenLinkedIdentityResolver",
]
