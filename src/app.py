"""Marketplace FastAPI application.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from marketplace import config
from marketplace.api import install_error_handlers, install_request_context
from marketplace.domain import marketplace
from marketplace.utils.db import close_db, setup_db
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the domain.toml overlay (memory stores by default,
# PostgreSQL under "production").
marketplace.init()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_db(marketplace)
    logger.info("Marketplace started", domain=marketplace.name)
    yield
    close_db(marketplace)
    logger.info("Marketplace stopped")


def create_app() -> FastAPI:
    from marketplace.cart.api import cart_router
    from marketplace.catalogue.api import product_router
    from marketplace.identity.api import auth_router, user_router
    from marketplace.purchase.api import purchase_router

    app = FastAPI(
        title="Marketplace API",
        description="Second-hand marketplace: accounts, listings, carts and purchases",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_request_context(app, marketplace)
    install_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(user_router)
    app.include_router(product_router)
    app.include_router(cart_router)
    app.include_router(purchase_router)

    media_root = Path(config.MEDIA_ROOT)
    media_root.mkdir(parents=True, exist_ok=True)
    app.mount(config.MEDIA_URL, StaticFiles(directory=media_root), name="media")

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": marketplace.name})

    return app


app = create_app()
