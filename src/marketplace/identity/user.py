"""User aggregate root: a marketplace participant who can both sell and buy."""

from datetime import UTC, datetime

from protean.fields import DateTime, String

from marketplace.domain import marketplace
from marketplace.identity.email import EmailAddress

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


@marketplace.aggregate
class User:
    """A registered person on the marketplace, identified by a unique email.

    The stored credential is a one-way hash produced by
    :mod:`marketplace.identity.passwords`; it never leaves the identity
    package. Public callers see the projection returned by :meth:`to_public`.
    """

    email: String(required=True, max_length=254, unique=True)
    username: String(required=True, max_length=50, sanitize=False)
    password_hash: String(required=True, max_length=255)
    avatar_url: String(max_length=500)
    created_at: DateTime()
    last_login_at: DateTime()

    @classmethod
    def register(cls, email, username, password_hash):
        from marketplace.identity.events import UserRegistered

        address = EmailAddress(address=(email or "").strip()).normalized()
        now = datetime.now(UTC)

        user = cls(
            email=address,
            username=username.strip() if username else username,
            password_hash=password_hash,
            created_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                email=address,
                username=user.username,
                registered_at=now,
            )
        )
        return user

    def update_profile(self, username=_UNSET, email=_UNSET, avatar_url=_UNSET):
        from marketplace.identity.events import ProfileUpdated

        if username is not _UNSET:
            self.username = username.strip() if username else username
        if email is not _UNSET:
            self.email = EmailAddress(address=(email or "").strip()).normalized()
        if avatar_url is not _UNSET:
            self.avatar_url = avatar_url

        self.raise_(
            ProfileUpdated(
                user_id=self.id,
                email=self.email,
                username=self.username,
                avatar_url=self.avatar_url,
            )
        )

    def record_login(self):
        from marketplace.identity.events import UserLoggedIn

        now = datetime.now(UTC)
        self.last_login_at = now
        self.raise_(UserLoggedIn(user_id=self.id, logged_in_at=now))

    def to_public(self) -> dict:
        return {
            "id": str(self.id),
            "email": self.email,
            "username": self.username,
            "avatar_url": self.avatar_url,
        }
