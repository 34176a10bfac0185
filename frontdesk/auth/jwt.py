"""JWT access tokens for front-desk sessions."""

import uuid
from datetime import datetime, timedelta, timezone

from jose import jwt

from frontdesk.config import Settings


def create_access_token(
    username: str,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed access token for ``username``.

    Each token carries a random ``jti`` so a single session can be revoked
    on logout without affecting the user's other sessions.

    Args:
        username: Subject of the token.
        settings: Source of the signing key, algorithm, and default lifetime.
        expires_delta: Custom expiration duration. Defaults to
            ``settings.jwt_access_token_expire_minutes`` minutes.

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes))
    payload = {
        "sub": username,
        "jti": uuid.uuid4().hex,
        "iat": now,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Settings) -> dict:
    """Decode and verify a token.

    Raises:
        jose.JWTError: If the token is invalid, expired, or malformed.
    """
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
