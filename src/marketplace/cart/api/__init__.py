"""Cart API package."""

from marketplace.cart.api.routes import cart_router

__all__ = ["cart_router"]
