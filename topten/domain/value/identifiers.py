"""Strongly typed identifiers for Top Ten domain entities.

Identifiers are short URL-safe random strings with no structural meaning.
NewType keeps list, item, criterion and user ids from being mixed up.
"""

import secrets
from typing import NewType

ListId = NewType("ListId", str)
ItemId = NewType("ItemId", str)
CriterionId = NewType("CriterionId", str)
UserId = NewType("UserId", str)

# token_urlsafe(n) yields ceil(4n/3) characters
LIST_ID_BYTES = 9  # 12 chars, 72 bits
ITEM_ID_BYTES = 9  # 12 chars
CRITERION_ID_BYTES = 6  # 8 chars, unique within one list
USER_ID_BYTES = 12  # 16 chars
SECRET_BYTES = 24  # 32 chars


def new_list_id() -> ListId:
    return ListId(secrets.token_urlsafe(LIST_ID_BYTES))


def new_item_id() -> ItemId:
    return ItemId(secrets.token_urlsafe(ITEM_ID_BYTES))


def new_criterion_id() -> CriterionId:
    return CriterionId(secrets.token_urlsafe(CRITERION_ID_BYTES))


def new_user_id() -> UserId:
    """Mint a local user id for identities not backed by a provider."""
    return UserId(secrets.token_urlsafe(USER_ID_BYTES))


def new_secret() -> str:
    """Mint an opaque bearer secret (owner secret or member token)."""
    return secrets.token_urlsafe(SECRET_BYTES)
