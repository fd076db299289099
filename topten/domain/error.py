"""Domain layer errors.

Each error carries an ``ErrorKind`` so that the application layer can turn it
into a discriminated result without inspecting exception types.
"""

from typing import ClassVar

from topten.domain.value.types import ErrorKind


class DomainError(Exception):
    """Base domain error."""

    kind: ClassVar[ErrorKind] = ErrorKind.VALIDATION


class ValidationError(DomainError):
    """Input violates a data model rule (bad rating value, empty name)."""

    kind = ErrorKind.VALIDATION


class UnauthenticatedError(DomainError):
    """No caller identity could be resolved."""

    kind = ErrorKind.UNAUTHENTICATED

    def __init__(self, message: str = "You must be signed in to do this"):
        super().__init__(message)


class UnauthorizedError(DomainError):
    """Owner secret missing or wrong."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, list_id: str):
        self.list_id = list_id
        super().__init__(f"Owner secret does not match list {list_id}")


class ForbiddenError(DomainError):
    """Caller is not allowed to perform a member action."""

    kind = ErrorKind.FORBIDDEN


class NotAMemberError(ForbiddenError):
    """Caller has not joined the list."""

    def __init__(self, list_id: str, user_id: str):
        self.list_id = list_id
        self.user_id = user_id
        super().__init__(f"User {user_id} has not joined list {list_id}")


class ListLockedError(ForbiddenError):
    """List is locked against new items."""

    def __init__(self, list_id: str):
        self.list_id = list_id
        super().__init__(f"List {list_id} is locked; no new items can be added")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a name collides with an existing one."""

    kind = ErrorKind.CONFLICT


class StorageError(DomainError):
    """The key-value store failed to read or write."""

    kind = ErrorKind.STORAGE
