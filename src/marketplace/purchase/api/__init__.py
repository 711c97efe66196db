"""Purchase API package."""

from marketplace.purchase.api.routes import purchase_router

__all__ = ["purchase_router"]
