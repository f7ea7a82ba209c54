"""Host Resolution — extract, normalize and validate the tenant host of a request.

Invariants:
    - x-forwarded-host wins over host; empty values fall through
    - Port suffix and a leading "www." (any case) are stripped; result is lower-cased
    - A host is routable only if it passes BOTH the pattern and the blacklist
    - display_host() never returns characters outside [a-z0-9.-]

Design Decisions:
    - Pattern and blacklist kept as two independent layers: either may be relaxed
      by a future edit without opening traversal (ADR: defense in depth)
    - fullmatch over match+$: "$" accepts a trailing newline
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass

_HOST_PATTERN = re.compile(r"[a-z0-9][a-z0-9.-]*\.[a-z]{2,}", re.IGNORECASE)
_WWW_PREFIX = re.compile(r"^www\.", re.IGNORECASE)
_SAFE_DISPLAY = re.compile(r"[a-z0-9.-]+")
_FORBIDDEN_FRAGMENTS = ("..", "/", "\\")


@dataclass(frozen=True)
class HostCandidate:
    """Header value as received plus its normalized form."""
    raw: str
    host: str


def extract_host(headers: Mapping[str, str]) -> HostCandidate:
    """Pick the request host and normalize it.

    A comma-separated value (proxy chain) contributes its first non-empty entry;
    a value with no usable entry falls through to the next header.
    """
    raw, first = "", ""
    for name in ("x-forwarded-host", "host"):
        raw = headers.get(name) or ""
        first = _first_entry(raw)
        if first:
            break
    host = first.split(":", 1)[0]
    host = _WWW_PREFIX.sub("", host, count=1)
    return HostCandidate(raw=raw, host=host.lower())


def matches_host_pattern(host: str) -> bool:
    return bool(host) and _HOST_PATTERN.fullmatch(host) is not None


def contains_forbidden_fragment(host: str) -> bool:
    return any(fragment in host for fragment in _FORBIDDEN_FRAGMENTS)


def display_host(host: str) -> str | None:
    """Host value safe to echo back to the caller, or None."""
    if host and _SAFE_DISPLAY.fullmatch(host) and not contains_forbidden_fragment(host):
        return host
    return None


def _first_entry(value: str) -> str:
    return next((entry.strip() for entry in value.split(",") if entry.strip()), "")
