"""Serve Domain Route — catch-all entry point that hands every page request to the router.

Invariants:
    - Matches any path; it is the only route, so no tenant URL is shadowed
    - GET and HEAD only — no request body is consumed
    - Every exception leaves this route as a DomainRouterError, so the global
      handler answers it and nothing reaches ServerErrorMiddleware (which re-raises)

Design Decisions:
    - Plain def, not async def: filesystem calls block, FastAPI moves them to the
      threadpool
    - get_settings() called inside the try, not via Depends: an invalid
      environment must also end as a 500 JSON response
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from domain_router.config import get_settings
from domain_router.core.errors import DomainRouterError, ErrorContext, InternalRouterError
from domain_router.services.serve_domain import serve_domain

logger = logging.getLogger(__name__)
router = APIRouter(tags=["sites"])


@router.api_route(
    "/{full_path:path}", methods=["GET", "HEAD"], response_class=HTMLResponse,
)
def serve_site_page(request: Request):
    """Serve the index.html of the site named by the request host."""
    try:
        return serve_domain(request.headers, request.url.path, get_settings())
    except DomainRouterError:
        raise
    except Exception as exc:
        logger.error(
            f"Unexpected failure on {request.url.path}: {exc}",
            extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
            exc_info=True,
        )
        raise InternalRouterError(ErrorContext(path=request.url.path)) from exc
