"""Marketplace errors that are not covered by Protean's exception types.

Input problems are raised as ``protean.exceptions.ValidationError`` and
missing records as ``protean.exceptions.ObjectNotFoundError``.
"""


class MarketplaceError(Exception):
    """Base class for marketplace failures carrying a client-facing message."""

    default_message = "Request could not be completed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationError(MarketplaceError):
    """Credentials did not match, or the session token is missing or invalid."""

    default_message = "Invalid credentials"


class PermissionDeniedError(MarketplaceError):
    """The authenticated caller may not act on the addressed record."""

    default_message = "You are not allowed to perform this action"


class EmptyCartError(MarketplaceError):
    """Checkout was attempted on a cart with no entries."""

    default_message = "Cart is empty"
