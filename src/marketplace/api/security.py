"""Resolve the authenticated caller from an ``Authorization: Bearer`` header."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from marketplace.exceptions import AuthenticationError, PermissionDeniedError
from marketplace.identity.tokens import SessionClaims, decode_token

bearer_scheme = HTTPBearer(auto_error=False)


def current_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> SessionClaims:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Missing session token")
    return decode_token(credentials.credentials)


def ensure_caller_is(caller: SessionClaims, user_id: str) -> None:
    """Reject requests that address another user's records."""
    if str(caller.user_id) != str(user_id):
        raise PermissionDeniedError()
