"""
Notes API Backend — Authenticated User Resolution
===================================================

What:  Resolves the user id for a request from an `Authorization: Bearer <jwt>` header.
Why:   Handlers receive the user id as an explicit argument; this module is
       the only place that knows where it comes from.
How:   python-jose verifies the token signature and expiry with the configured
       secret; the `sub` claim is the user id.

Failure modes (all → AuthenticationError, 401):
    - no Authorization header / not a bearer scheme
    - bad signature, malformed or expired token
    - token without a `sub` claim
    - JWT_SECRET not configured
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from notes_api.config import settings
from notes_api.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

# auto_error=False: missing credentials are reported through our own
# AuthenticationError envelope instead of FastAPI's default 403
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(subject: str, expires_minutes: Optional[int] = None) -> str:
    """
    Issue a signed access token for `subject`.

    Used by tests and local tooling; production tokens are expected to come
    from the identity provider sharing JWT_SECRET.
    """
    if not settings.jwt_secret:
        raise AuthenticationError("Token signing is not configured")
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=expires_minutes or settings.jwt_exp_minutes)
    payload = {"sub": subject, "iat": int(now.timestamp()), "exp": int(exp.timestamp())}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Verify a token and return its claims. Raises AuthenticationError."""
    if not settings.jwt_secret:
        logger.error("JWT_SECRET is not configured; rejecting bearer token")
        raise AuthenticationError("User not authenticated")
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.info("Rejected bearer token: %s", str(e))
        raise AuthenticationError("Invalid or expired token")


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    FastAPI dependency returning the authenticated user id.

    Routes pass the returned value straight to the handler.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("User not authenticated")

    claims = decode_token(credentials.credentials)
    subject = claims.get("sub")
    if not subject:
        raise AuthenticationError("Invalid token: missing subject")
    return str(subject)
