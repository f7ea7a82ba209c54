"""Structured Logging — request-aware JSON and text formatters.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request context (host, raw_host, path) is grouped under "request" in JSON and
      appended as a bracketed suffix in text
    - raw_host only appears when it differs from the normalized host
    - Outcome fields (status_code, error_code, category, severity) stay top-level

Design Decisions:
    - stdlib logging formatters, no third-party lib: one process, one stream handler
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

_OUTCOME_FIELDS = ("status_code", "error_code", "category", "severity")


def request_context(record: logging.LogRecord) -> dict:
    """Host/path fields attached to a record via `extra`."""
    host = record.__dict__.get("host")
    raw_host = record.__dict__.get("raw_host")
    path = record.__dict__.get("path")
    context = {}
    if host is not None:
        context["host"] = host
    if raw_host and raw_host != host:
        context["raw_host"] = raw_host
    if path is not None:
        context["path"] = path
    return context


class JSONFormatter(logging.Formatter):
    """One JSON object per line, request context nested."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = request_context(record)
        if context:
            log["request"] = context
        for key in _OUTCOME_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class RequestTextFormatter(logging.Formatter):
    """Human-readable lines with a [host=... path=...] suffix."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s — %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = request_context(record)
        if not context:
            return line
        parts = []
        if "host" in context:
            host = context["host"] or '""'
            if "raw_host" in context:
                host += f" (raw {context['raw_host']!r})"
            parts.append(f"host={host}")
        if "path" in context:
            parts.append(f"path={context['path']}")
        suffix = f" [{' '.join(parts)}]"
        # keep the traceback after the context suffix
        head, sep, tail = line.partition("\n")
        return head + suffix + sep + tail


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else RequestTextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
