"""Translate domain exceptions into ``{"error": ...}`` JSON responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError

from marketplace.exceptions import AuthenticationError, EmptyCartError, PermissionDeniedError
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


def describe(exc: Exception) -> str:
    """Flatten Protean's ``{field: [messages]}`` payloads into one line."""
    messages = getattr(exc, "messages", None)
    if messages is None and exc.args:
        messages = exc.args[0]

    if isinstance(messages, dict):
        parts = []
        for field, errors in messages.items():
            text = ", ".join(str(e) for e in errors) if isinstance(errors, list | tuple) else str(errors)
            parts.append(text if field.startswith("_") else f"{field}: {text}")
        return "; ".join(parts)
    return str(messages) if messages else exc.__class__.__name__


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": describe(exc)})


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(400, exc)


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path", "form"))
        parts.append(f"{location}: {err.get('msg')}" if location else err.get("msg", "Invalid request"))
    return JSONResponse(status_code=400, content={"error": "; ".join(parts) or "Invalid request"})


async def _not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "Not found"})


async def _authentication_error(request: Request, exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(status_code=401, content={"error": exc.message})


async def _permission_denied(request: Request, exc: PermissionDeniedError) -> JSONResponse:
    logger.warning("Permission denied", path=request.url.path)
    return JSONResponse(status_code=403, content={"error": exc.message})


async def _empty_cart(request: Request, exc: EmptyCartError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message})


async def _version_conflict(request: Request, exc: ExpectedVersionError) -> JSONResponse:
    logger.warning("Concurrent modification rejected", path=request.url.path)
    return JSONResponse(status_code=409, content={"error": "Record was modified concurrently, retry the request"})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(AuthenticationError, _authentication_error)
    app.add_exception_handler(PermissionDeniedError, _permission_denied)
    app.add_exception_handler(EmptyCartError, _empty_cart)
    app.add_exception_handler(ExpectedVersionError, _version_conflict)
