"""TopTenList aggregate root.

The list owns its criteria, items and members. It is always read and written
as a whole; there are no partial updates.
"""

import secrets
from datetime import datetime, timezone

from pydantic import Field, model_validator

from topten.domain.model.common import DomainModel
from topten.domain.model.criterion import Criterion
from topten.domain.model.item import Item
from topten.domain.model.user import User
from topten.domain.value import CriterionId, CriterionName, ItemId, ListId, UserId


class TopTenList(DomainModel):
    """List aggregate root.

    Invariants:
    - member ids are unique
    - criterion ids are unique and names are unique case-insensitively
    - item ids are unique
    - ``owner_secret`` is only ever compared, never returned by views
    """

    id: ListId
    name: str = Field(min_length=1, max_length=200)
    criteria: list[Criterion] = Field(default_factory=list)
    items: list[Item] = Field(default_factory=list)
    users: list[User] = Field(default_factory=list)
    owner_id: UserId
    owner_secret: str = Field(min_length=1, repr=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    is_locked: bool = False

    @model_validator(mode="after")
    def validate_unique_children(self) -> "TopTenList":
        """Check uniqueness of member, criterion and item ids."""
        user_ids = [u.id for u in self.users]
        if len(set(user_ids)) != len(user_ids):
            raise ValueError("Duplicate member in list")

        criterion_ids = [c.id for c in self.criteria]
        if len(set(criterion_ids)) != len(criterion_ids):
            raise ValueError("Duplicate criterion id in list")

        criterion_keys = [c.name.key for c in self.criteria]
        if len(set(criterion_keys)) != len(criterion_keys):
            raise ValueError("Criterion names must be unique (case-insensitive)")

        item_ids = [i.id for i in self.items]
        if len(set(item_ids)) != len(item_ids):
            raise ValueError("Duplicate item id in list")
        return self

    def find_user(self, user_id: UserId) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_token(self, user_token: str) -> User | None:
        for user in self.users:
            if user.user_token and secrets.compare_digest(
                user.user_token.encode(), user_token.encode()
            ):
                return user
        return None

    def find_item(self, item_id: ItemId) -> Item | None:
        return next((i for i in self.items if i.id == item_id), None)

    def find_criterion(self, criterion_id: CriterionId) -> Criterion | None:
        return next((c for c in self.criteria if c.id == criterion_id), None)

    def has_member(self, user_id: UserId) -> bool:
        return self.find_user(user_id) is not None

    def has_criterion_named(self, name: CriterionName) -> bool:
        return any(c.name.key == name.key for c in self.criteria)

    def verify_owner(self, owner_secret: str | None) -> bool:
        """Constant-time comparison of a presented owner secret.

        Compared as UTF-8 bytes so any presented text is simply a mismatch.
        """
        if not owner_secret:
            return False
        return secrets.compare_digest(self.owner_secret.encode(), owner_secret.encode())

    def is_owned_by(self, user_id: UserId | None) -> bool:
        return user_id is not None and self.owner_id == user_id
