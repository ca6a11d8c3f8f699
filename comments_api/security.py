"""
Bearer-token helpers.

Tokens are minted by the platform's auth service; this module only needs
to verify them.  ``build_access_token`` exists for local development and
tests.
"""
from __future__ import annotations

import time
from typing import Any

import jwt

from comments_api.config import settings


class AuthSecurityError(RuntimeError):
    pass


def build_access_token(*, user_id: str, expires_in: int = 3600) -> str:
    issued_at = int(time.time())
    payload = {
        "sub": str(user_id),
        "type": "access",
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(raw, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    if not str(payload.get("sub") or "").strip():
        raise AuthSecurityError("Access token has no subject.")
    return payload


def user_id_from_authorization(authorization: str | None) -> str | None:
    """
    Return the ``sub`` claim of a ``Bearer <token>`` header value, or None
    when the header is absent, malformed, or carries an invalid token.
    """
    parts = (authorization or "").strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    try:
        return str(decode_access_token(parts[1])["sub"])
    except AuthSecurityError:
        return None
