# app/core/security.py
"""
Bearer token helpers shared by the API dependencies and the front-end gate.
"""

from typing import Optional

from jose import JWTError, jwt

from app.core.config import settings
from app.schemas.token import TokenPayload


def decode_token(token: str) -> TokenPayload:
    """Decode and validate a JWT. Raises JWTError or ValueError when invalid."""
    payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    return TokenPayload(**payload)


def user_name_from_authorization(header: Optional[str]) -> Optional[str]:
    """
    Resolve the caller's user name from an ``Authorization`` header value.

    Returns None for anonymous callers: no header, a non-bearer scheme, or a
    token that fails validation.
    """
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    try:
        return decode_token(token.strip()).sub
    except (JWTError, ValueError):
        return None


def create_access_token(user_name: str, expires_at: int) -> str:
    return jwt.encode(
        {"sub": user_name, "exp": expires_at},
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )
