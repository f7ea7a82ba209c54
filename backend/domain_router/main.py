"""Domain Router API — FastAPI application entry point.

Invariants:
    - Single catch-all site route: every path belongs to the tenant named by the host
    - Global error handlers map DomainRouterError → HTML page or JSON response
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - No StaticFiles mount, no docs/openapi routes, no health probes: any of them
      would take paths away from tenant sites
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from domain_router import __version__
from domain_router.api.error_handlers import register_error_handlers
from domain_router.api.routes import serve_domain
from domain_router.config import get_settings
from domain_router.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Domain Router started (site root: {settings.root_dir})")
    yield
    logger.info("Domain Router shutting down")


app = FastAPI(
    title="Domain Router", version=__version__, lifespan=lifespan,
    docs_url=None, redoc_url=None, openapi_url=None,
)

app.include_router(serve_domain.router)

register_error_handlers(app)
