"""Bearer token and permission dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.services.project_access_evaluator import split_claim_value
from app.core.config import get_settings
from app.core.constants import PERMISSIONS_CLAIM
from app.domain.exceptions import AuthenticationException, AuthorizationException
from app.domain.identity import CallerIdentity
from app.infrastructure.security.jwt import verify_token

_http_bearer = HTTPBearer(auto_error=False)


def has_permission(identity: CallerIdentity, permission: str) -> bool:
    """Return True if the permissions claim carries the permission (case-insensitive)."""
    wanted = permission.casefold()
    return any(
        token.casefold() == wanted
        for raw in identity.values_for((PERMISSIONS_CLAIM,))
        for token in split_claim_value(raw)
    )


async def get_caller_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> CallerIdentity:
    """Return the caller identity from the bearer JWT; raise 401 if missing or invalid."""
    if credentials is None:
        raise AuthenticationException("Not authenticated")
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        raise AuthenticationException("Invalid or expired token") from e
    return CallerIdentity.from_claims(payload)


async def require_document_read(
    identity: Annotated[CallerIdentity, Depends(get_caller_identity)],
) -> CallerIdentity:
    """Require the configured document read permission; raise 403 when absent."""
    permission = get_settings().required_permission
    if permission and not has_permission(identity, permission):
        raise AuthorizationException(permission=permission)
    return identity
