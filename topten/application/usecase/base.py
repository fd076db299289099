"""Base use case and result model."""

from abc import ABC, abstractmethod
from typing import Any, Self

import logfire
from pydantic import BaseModel

from topten.domain.error import DomainError, StorageError
from topten.domain.value import ErrorKind

STORAGE_FAILURE_MESSAGE = "Storage unavailable, please try again"


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class ActionResponse(BaseModel):
    """Discriminated result of a list operation.

    Callers must check ``success``; on failure ``error`` and ``error_kind``
    are set and payload fields are left empty.
    """

    success: bool = True
    error: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def failure(cls, error: DomainError) -> Self:
        """Build a failed result from a domain error.

        Storage errors are logged in full but reported generically.
        """
        if isinstance(error, StorageError):
            logfire.error("Storage failure", error=str(error))
            return cls(
                success=False, error=STORAGE_FAILURE_MESSAGE, error_kind=error.kind
            )
        logfire.info("Operation rejected", kind=error.kind.value, error=str(error))
        return cls(success=False, error=str(error), error_kind=error.kind)
