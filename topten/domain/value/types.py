"""Domain value objects for Top Ten.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules shared by the list aggregate.
"""

from enum import Enum

from pydantic import field_validator

from topten.domain.value.common import RootValueObject, ValueObject
from topten.domain.value.identifiers import UserId

MIN_RATING = 1
MAX_RATING = 5
NO_EXPERIENCE = -1


class IdentityMode(str, Enum):
    """How callers are recognized."""

    ANONYMOUS_COOKIE = "anonymous_cookie"
    TOKEN_LINKED = "token_linked"
    EXTERNAL_PROVIDER = "external_provider"


class ErrorKind(str, Enum):
    """Failure categories reported by list operations."""

    UNAUTHENTICATED = "unauthenticated"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation"
    STORAGE = "storage"


class CriterionName(RootValueObject[str]):
    """Name of a rating dimension, e.g. 'Cost' or 'Atmosphere'.

    Surrounding whitespace is stripped. Names are compared
    case-insensitively within a list via ``key``.
    """

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip whitespace and check length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Criterion name must be 1-100 characters")
        return v

    @property
    def key(self) -> str:
        """Case-insensitive comparison key."""
        return self.root.casefold()


class ResolvedIdentity(ValueObject):
    """Who is making a request, as resolved by an identity adapter.

    The domain only relies on ``user_id`` and ``display_name``; the rest is
    copied onto the member record when present.
    """

    user_id: UserId
    display_name: str
    email: str | None = None
    avatar_url: str | None = None
    mode: IdentityMode


def is_valid_rating(value: int) -> bool:
    """Whether a value may be stored as a rating (1-5 or no experience)."""
    return value == NO_EXPERIENCE or MIN_RATING <= value <= MAX_RATING
