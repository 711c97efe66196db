"""Identity API package."""

from marketplace.identity.api.routes import auth_router, user_router

__all__ = ["auth_router", "user_router"]
