"""JWT token utilities.

Two kinds of tokens pass through here: identity cookies this service signs
for anonymous participants, and session tokens issued by an external
identity provider, which are only verified.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from topten.config import IdentitySettings


class IdentityTokenPayload(BaseModel):
    """Payload of an anonymous identity cookie."""

    user_id: str
    display_name: str
    exp: datetime


class ProviderSessionPayload(BaseModel):
    """Claims read from an external provider's session token."""

    sub: str
    name: str | None = None
    username: str | None = None
    email: str | None = None
    picture: str | None = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_identity_token(
    user_id: str, display_name: str, settings: IdentitySettings
) -> str:
    """Create a signed identity token for an anonymous participant.

    Args:
        user_id: Locally generated user ID
        display_name: Name the participant chose
        settings: Identity settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.cookie_max_age_days)

    payload = {
        "user_id": user_id,
        "display_name": display_name,
        "exp": expiry,
    }

    return jwt.encode(
        payload, settings.cookie_secret, algorithm=settings.cookie_algorithm
    )


def verify_identity_token(token: str, settings: IdentitySettings) -> IdentityTokenPayload:
    """Verify and decode an anonymous identity token.

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.cookie_secret, algorithms=[settings.cookie_algorithm]
        )
        return IdentityTokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, PydanticValidationError):
        raise JWTError("Invalid token")


def verify_provider_token(token: str, settings: IdentitySettings) -> ProviderSessionPayload:
    """Verify a session token issued by the external identity provider.

    Raises:
        JWTError: If token is invalid or expired
    """
    options = {"require": ["sub", "exp"]}
    try:
        payload = jwt.decode(
            token,
            settings.provider_secret,
            algorithms=[settings.provider_algorithm],
            audience=settings.provider_audience,
            options=options,
        )
        return ProviderSessionPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, PydanticValidationError):
        raise JWTError("Invalid token")
