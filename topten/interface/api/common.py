"""Helpers shared by the API routes."""

from fastapi import HTTPException, Request, Response, status

from topten.application.usecase.base import ActionResponse
from topten.config import Settings
from topten.domain.error import DomainError
from topten.domain.service import IdentityService, IssuedCredential, RequestContext
from topten.domain.value import ErrorKind, ListId, ResolvedIdentity

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.VALIDATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.STORAGE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def request_context(request: Request, list_id: str | None = None) -> RequestContext:
    """Collect what identity resolution may look at from an HTTP request."""
    return RequestContext(
        list_id=ListId(list_id) if list_id else None,
        cookies=dict(request.cookies),
        headers={k.lower(): v for k, v in request.headers.items()},
    )


async def resolve_caller(
    identity_service: IdentityService, context: RequestContext
) -> ResolvedIdentity | None:
    """Resolve the caller, reporting store failures like a failed use case.

    Token-linked resolution reads the list, so it can hit the store.

    Raises:
        HTTPException: If resolution fails with a domain error
    """
    try:
        return await identity_service.resolve(context)
    except DomainError as e:
        raise_for_failure(ActionResponse.failure(e))
        raise


def raise_for_failure(result: ActionResponse) -> None:
    """Raise the HTTP error matching a failed use case result.

    Raises:
        HTTPException: If the result is a failure
    """
    if result.success:
        return
    status_code = ERROR_STATUS.get(
        result.error_kind or ErrorKind.VALIDATION, status.HTTP_400_BAD_REQUEST
    )
    raise HTTPException(status_code=status_code, detail=result.error)


def set_credential_cookies(
    response: Response, credentials: list[IssuedCredential], settings: Settings
) -> None:
    """Hand issued credentials to the browser as HTTP-only cookies."""
    for credential in credentials:
        response.set_cookie(
            key=credential.name,
            value=credential.value,
            httponly=True,
            secure=settings.secure_cookies,
            samesite="lax",
            path="/",
            max_age=credential.max_age,
        )
