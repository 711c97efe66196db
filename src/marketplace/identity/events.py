"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="User")
class UserRegistered:
    """A new account was created on the marketplace."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
    username: String(required=True, sanitize=False)
    registered_at: DateTime(required=True)


@marketplace.event(part_of="User")
class ProfileUpdated:
    """A user changed their username, email or avatar."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
    username: String(required=True, sanitize=False)
    avatar_url: String()


@marketplace.event(part_of="User")
class UserLoggedIn:
    """A user authenticated successfully and was issued a session token."""

    __version__ = 1

    user_id: Identifier(required=True)
    logged_in_at: DateTime(required=True)
