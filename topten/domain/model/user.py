"""User (list member) entity.

Users exist only inside a list. The id is either an external identity
provider's id or a locally generated one.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from topten.domain.model.common import DomainModel
from topten.domain.value import UserId


class User(DomainModel):
    """Member of a list."""

    id: UserId
    display_name: str = Field(min_length=1, max_length=100)
    joined_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    # Per-list secret for re-recognizing the member on another device
    user_token: Optional[str] = Field(default=None, repr=False)
