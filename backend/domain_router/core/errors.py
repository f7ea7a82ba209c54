"""Error Hierarchy — typed, categorized exceptions for every Domain Router outcome.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Severity decides the log level the error is recorded at
    - 404-class errors render as the HTML not-found page; 403/500 render as JSON
    - JSON envelope built from http_status, message and context.timestamp
    - No filesystem paths or exception text in user-facing messages

Design Decisions:
    - Single hierarchy with DomainRouterError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: host/path travel with the error into the logs
      without coupling to the logging framework
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def log_level(self) -> int:
        return getattr(logging, self.name)


class ErrorCategory(str, Enum):
    """High-level error categories, one per taxonomy class."""
    CLIENT_ADDRESSING = "client_addressing"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHORIZATION = "authorization"
    ENVIRONMENT = "environment"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    host: str | None = None
    path: str | None = None
    display_host: str | None = None


class DomainRouterError(Exception):
    """Base exception for all Domain Router errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def renders_html(self) -> bool:
        """404-class errors are shown as the not-found page."""
        return self.http_status == 404


# ─── Client Addressing / Not Found (404) ────────────────────────

class InvalidDomainError(DomainRouterError):
    """Host is empty, malformed, or contains traversal characters."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_DOMAIN", ErrorCategory.CLIENT_ADDRESSING,
            ErrorSeverity.WARNING, context, 404,
        )


class IllegalPathError(DomainRouterError):
    """Resolved path escapes the site root."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Illegal path access",
            "ILLEGAL_PATH", ErrorCategory.CLIENT_ADDRESSING,
            ErrorSeverity.WARNING, context, 404,
        )


class SiteNotFoundError(DomainRouterError):
    """Valid host without a tenant index file."""
    def __init__(self, host: str, context: ErrorContext | None = None):
        super().__init__(
            f'The page for domain "{host}" has not been created yet',
            "SITE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.host = host


class WrongResourceTypeError(DomainRouterError):
    """Tenant index path exists but is not a regular file."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Wrong resource type",
            "WRONG_RESOURCE_TYPE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class ResourceNotFoundError(DomainRouterError):
    """Filesystem reported a missing entry outside the explicit checks."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "The requested resource does not exist",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Authorization (403) ────────────────────────────────────────

class AccessDeniedError(DomainRouterError):
    """Filesystem permission denied."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Access denied",
            "ACCESS_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.ERROR, context, 403,
        )


# ─── Environment / Internal (500) ───────────────────────────────

class PageReadError(DomainRouterError):
    """Index file vanished or became unreadable after the existence check."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Cannot read page content",
            "PAGE_READ_FAILED", ErrorCategory.ENVIRONMENT,
            ErrorSeverity.CRITICAL, context, 500,
        )


class InternalRouterError(DomainRouterError):
    """Unclassified filesystem failure or unexpected exception."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Internal server error",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


def classify_os_error(exc: OSError, context: ErrorContext | None = None) -> DomainRouterError:
    """Map a raw filesystem error onto the response taxonomy."""
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return ResourceNotFoundError(context)
    if isinstance(exc, PermissionError):
        return AccessDeniedError(context)
    return InternalRouterError(context)
