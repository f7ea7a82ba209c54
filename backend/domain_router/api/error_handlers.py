"""Error Handlers — global exception handlers for the Domain Router API.

Invariants:
    - DomainRouterError with 404 → HTML not-found page, no-store caching
    - DomainRouterError otherwise → JSON {error, code, message, timestamp}, no-cache
    - DomainRouterError logged at the level its severity names, with its category
    - Exception (catch-all) → 500 JSON, never leaks internal details; only reached by
      faults outside the site route, which converts its own exceptions

Design Decisions:
    - Two-layer handler: domain (DomainRouterError), catch-all (Exception)
    - Extracted from main.py (ADR: ExMA import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from domain_router.config import get_settings
from domain_router.core.error_page import render_not_found_page
from domain_router.core.errors import DomainRouterError
from domain_router.schemas.error import ErrorBody

logger = logging.getLogger(__name__)

NOT_FOUND_CACHE_CONTROL = "no-cache, no-store, must-revalidate"
ERROR_CACHE_CONTROL = "no-cache"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Domain Router error handler."""

    @app.exception_handler(DomainRouterError)
    async def domain_error_handler(request: Request, exc: DomainRouterError):
        logger.log(
            exc.severity.log_level,
            f"DomainRouterError: {exc.message}",
            extra={
                "error_code": exc.code,
                "category": exc.category.value,
                "severity": exc.severity.value,
                "path": request.url.path,
                "host": exc.context.host,
                "status_code": exc.http_status,
            },
        )
        if exc.renders_html:
            return build_not_found_response(exc.message, exc.context.display_host)
        return build_json_error_response(exc.http_status, exc.message, exc)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return build_json_error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error",
        )


def build_not_found_response(message: str, host: str | None) -> HTMLResponse:
    page = render_not_found_page(message, host, get_settings().support_url)
    return HTMLResponse(
        content=page,
        status_code=status.HTTP_404_NOT_FOUND,
        headers={"Cache-Control": NOT_FOUND_CACHE_CONTROL},
    )


def build_json_error_response(
    status_code: int, message: str, exc: DomainRouterError | None = None,
) -> JSONResponse:
    body = ErrorBody(code=status_code, message=message)
    if exc is not None:
        body.timestamp = exc.context.timestamp
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers={"Cache-Control": ERROR_CACHE_CONTROL},
    )
