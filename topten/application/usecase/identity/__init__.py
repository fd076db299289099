"""Identity use cases."""

from .issue_identity import (
    IssueIdentityRequest,
    IssueIdentityResponse,
    IssueIdentityUseCase,
)

__all__ = ["IssueIdentityRequest", "IssueIdentityResponse", "IssueIdentityUseCase"]
