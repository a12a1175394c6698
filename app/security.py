"""
Bearer token helpers.

Access tokens are HS256 JWTs whose ``sub`` claim carries the user id.
Signing key, algorithm and lifetime come from the application settings.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from app.config import settings
from app.exceptions import UnauthorizedError

# user_id columns are 32-bit integers
MAX_USER_ID = 2**31 - 1


def create_access_token(user_id: int, expires_minutes: Optional[int] = None) -> str:
    """Create a signed access token for ``user_id``.

    Args:
        user_id: Identifier of the token owner, stored in ``sub``
        expires_minutes: Token lifetime; defaults to
            ``settings.access_token_expire_minutes``

    Returns:
        Encoded JWT string suitable for an ``Authorization: Bearer`` header
    """
    now = datetime.now(timezone.utc)
    lifetime = expires_minutes or settings.access_token_expire_minutes
    claims = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(minutes=lifetime),
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Verify signature and expiry of ``token`` and return its claims.

    Raises:
        UnauthorizedError: If the token is malformed, expired or badly signed
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise UnauthorizedError("Token has expired") from exc
    except jwt.PyJWTError as exc:
        raise UnauthorizedError("Invalid token") from exc


def user_id_from_token(token: str) -> int:
    """Extract a valid integer user id from the ``sub`` claim of ``token``."""
    claims = decode_access_token(token)
    try:
        user_id = int(claims["sub"])
    except (TypeError, ValueError) as exc:
        raise UnauthorizedError("Token subject is not a valid user id") from exc
    if not 0 < user_id <= MAX_USER_ID:
        raise UnauthorizedError("Token subject is not a valid user id")
    return user_id
