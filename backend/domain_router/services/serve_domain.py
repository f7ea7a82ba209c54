"""Serve Domain — map an inbound request to its tenant index.html or a typed error.

Invariants:
    - Host validation (pattern, then blacklist) runs before any filesystem call
    - The containment check runs on the normalized path before any filesystem call
    - Root landing page only for requests whose path is exactly "/"
    - Directories are never read or listed
    - Content is returned byte-for-byte (decoded as UTF-8, no newline translation)
    - Every OSError leaves this module as a DomainRouterError

Design Decisions:
    - Errors raised, not returned: api/error_handlers.py renders them
      (ADR: uniform error shape, same as the rest of the API)
    - os.stat over os.path.exists: exists() hides PermissionError, which must
      surface as 403
    - Synchronous IO: the route is a plain def, FastAPI runs it in the threadpool
"""

import logging
import os
import stat
from collections.abc import Mapping
from dataclasses import dataclass

from fastapi.responses import HTMLResponse

from domain_router.config import Settings
from domain_router.core.errors import (
    ErrorContext, IllegalPathError, InvalidDomainError, PageReadError,
    SiteNotFoundError, WrongResourceTypeError, classify_os_error,
)
from domain_router.core.host_resolution import (
    contains_forbidden_fragment, display_host, extract_host, matches_host_pattern,
)
from domain_router.core.site_paths import (
    is_within_root, landing_page_path, tenant_index_path,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SitePage:
    """A resolved, readable index file."""
    path: str
    content: str
    is_landing_page: bool = False


def serve_domain(
    headers: Mapping[str, str], url_path: str, settings: Settings,
) -> HTMLResponse:
    """Handle one request: resolve the tenant page and build the 200 response.

    Raises DomainRouterError subclasses for every negative outcome.
    """
    candidate = extract_host(headers)
    host = candidate.host
    logger.info(
        f"Request: host={candidate.raw!r} clean={host!r} path={url_path!r}",
        extra={"raw_host": candidate.raw, "host": host, "path": url_path},
    )
    context = ErrorContext(host=host, path=url_path, display_host=display_host(host))

    validate_host(host, context)

    try:
        page = resolve_site_page(settings.root_dir, host, url_path, context)
    except OSError as exc:
        logger.error(
            f"Filesystem error while serving {host!r}: {exc}",
            extra={"host": host, "path": url_path},
            exc_info=True,
        )
        raise classify_os_error(exc, context) from exc

    logger.info(
        f"Serving {'landing page' if page.is_landing_page else host + '/index.html'}",
        extra={"host": host, "path": url_path, "status_code": 200},
    )
    return HTMLResponse(
        content=page.content,
        status_code=200,
        headers={
            "Cache-Control": settings.page_cache_control,
            "X-Powered-By": settings.powered_by,
        },
    )


def validate_host(host: str, context: ErrorContext) -> None:
    """Pattern check, then blacklist check. Both must pass."""
    if not matches_host_pattern(host):
        logger.warning(
            f"Rejected host with invalid format: {host!r}",
            extra={"host": host, "error_code": "INVALID_DOMAIN"},
        )
        shown = context.display_host
        raise InvalidDomainError(
            f"Invalid domain: {shown}" if shown else "Invalid domain", context,
        )

    if contains_forbidden_fragment(host):
        logger.warning(
            f"Rejected suspicious host: {host!r}",
            extra={"host": host, "error_code": "INVALID_DOMAIN"},
        )
        raise InvalidDomainError("Illegal request", context)


def resolve_site_page(
    root: str, host: str, url_path: str, context: ErrorContext,
) -> SitePage:
    index_path = tenant_index_path(root, host)
    if not is_within_root(index_path, root):
        logger.warning(
            f"Rejected path outside site root for host {host!r}",
            extra={"host": host, "error_code": "ILLEGAL_PATH"},
        )
        raise IllegalPathError(context)

    index_stat = _stat_or_none(index_path)
    if index_stat is None:
        logger.info(f"No site for {host!r}", extra={"host": host, "path": url_path})
        if url_path == "/":
            landing = landing_page_path(root)
            landing_stat = _stat_or_none(landing)
            if landing_stat is not None and stat.S_ISREG(landing_stat.st_mode):
                logger.info("Falling back to landing page", extra={"host": host})
                return SitePage(landing, _read_page(landing, context), is_landing_page=True)
        raise SiteNotFoundError(host, context)

    if not stat.S_ISREG(index_stat.st_mode):
        logger.warning(
            f"Index for {host!r} is not a regular file",
            extra={"host": host, "error_code": "WRONG_RESOURCE_TYPE"},
        )
        raise WrongResourceTypeError(context)

    return SitePage(index_path, _read_page(index_path, context))


def _stat_or_none(path: str) -> os.stat_result | None:
    try:
        return os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return None


def _read_page(path: str, context: ErrorContext) -> str:
    try:
        with open(path, "rb") as f:
            return f.read().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(
            f"Failed to read page for {context.host!r}: {exc}",
            extra={"host": context.host, "error_code": "PAGE_READ_FAILED"},
            exc_info=True,
        )
        raise PageReadError(context) from exc
