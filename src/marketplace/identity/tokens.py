"""Session tokens: signed, time-bounded JWTs binding a user id and email."""

from dataclasses import dataclass
from datetime import UTC, datetime

from jose import JWTError, jwt

from marketplace import config
from marketplace.exceptions import AuthenticationError


@dataclass(frozen=True)
class SessionToken:
    """A freshly issued token and the claims it carries."""

    token: str
    user_id: str
    email: str
    expires_at: datetime


@dataclass(frozen=True)
class SessionClaims:
    """Verified claims of a presented token."""

    user_id: str
    email: str


def issue_token(user_id: str, email: str, now: datetime | None = None) -> SessionToken:
    issued_at = now or datetime.now(UTC)
    expires_at = issued_at + config.TOKEN_LIFETIME
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    token = jwt.encode(payload, config.SECRET_KEY, algorithm=config.TOKEN_ALGORITHM)
    return SessionToken(token=token, user_id=str(user_id), email=email, expires_at=expires_at)


def decode_token(token: str) -> SessionClaims:
    """Verify signature and expiry. Raises AuthenticationError otherwise."""
    if not token:
        raise AuthenticationError("Missing session token")
    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.TOKEN_ALGORITHM])
    except JWTError as exc:
        raise AuthenticationError("Invalid or expired session token") from exc

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Invalid or expired session token")
    return SessionClaims(user_id=user_id, email=payload.get("email", ""))
