"""JWT bearer token creation and verification.

Uses app.core.config for secret, algorithm and the optional audience/issuer.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.core.config import get_settings


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT with the given claims (dev tooling and tests).

    Args:
        data: Claims to encode (e.g. sub, project_id, org_id, permissions).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = datetime.now(UTC) + expires_delta
    if settings.jwt_audience and "aud" not in to_encode:
        to_encode["aud"] = settings.jwt_audience
    if settings.jwt_issuer and "iss" not in to_encode:
        to_encode["iss"] = settings.jwt_issuer
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces exp; audience and issuer are checked only when configured.

    Raises:
        ValueError: If token is invalid, expired, or fails audience/issuer checks.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={
                "require_exp": True,
                "verify_aud": settings.jwt_audience is not None,
            },
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    return payload
