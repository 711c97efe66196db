"""Per-request domain context and log context."""

from uuid import uuid4

from fastapi import FastAPI, Request
from protean.domain import Domain

from marketplace.utils.logging import add_context, clear_context


def install_request_context(app: FastAPI, domain: Domain) -> None:
    """Push ``domain``'s context around every request and tag logs with a request id."""

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        add_context(request_id=request.headers.get("x-request-id") or uuid4().hex)
        try:
            with domain.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        return response
