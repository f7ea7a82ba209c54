"""Host resolution tests — pure tests for extraction, validation and display.

Tests cover:
    - Header precedence and empty-value fall-through
    - Port, www. and case normalization
    - Pattern and blacklist as independent layers
    - display_host never returns unsafe characters
"""

import pytest

from domain_router.core.host_resolution import (
    contains_forbidden_fragment, display_host, extract_host, matches_host_pattern,
)


# --- extract_host -------------------------------------------------------------

def test_forwarded_host_preferred():
    candidate = extract_host({"x-forwarded-host": "a.com", "host": "b.com"})
    assert candidate.host == "a.com"
    assert candidate.raw == "a.com"


def test_empty_forwarded_host_falls_back_to_host():
    assert extract_host({"x-forwarded-host": "", "host": "b.com"}).host == "b.com"


def test_missing_headers_yield_empty_host():
    candidate = extract_host({})
    assert candidate.host == ""
    assert candidate.raw == ""


@pytest.mark.parametrize("raw,expected", [
    ("example.com:8080", "example.com"),
    ("www.example.com", "example.com"),
    ("WWW.Example.Com", "example.com"),
    ("Www.example.com:443", "example.com"),
    ("www.www.example.com", "www.example.com"),
    ("wwwexample.com", "wwwexample.com"),
    ("sub.www.example.com", "sub.www.example.com"),
])
def test_normalization(raw, expected):
    assert extract_host({"host": raw}).host == expected


def test_raw_value_kept_for_logging():
    candidate = extract_host({"host": "WWW.Example.com:80"})
    assert candidate.raw == "WWW.Example.com:80"


def test_forwarded_chain_first_entry():
    assert extract_host({"x-forwarded-host": "a.com:443, b.net"}).host == "a.com"


def test_forwarded_chain_skips_empty_entries():
    assert extract_host({"x-forwarded-host": ",example.com"}).host == "example.com"
    assert extract_host({"x-forwarded-host": " , b.net,"}).host == "b.net"


def test_forwarded_chain_without_entries_falls_back_to_host():
    candidate = extract_host({"x-forwarded-host": ",", "host": "b.com"})
    assert candidate.host == "b.com"
    assert candidate.raw == "b.com"


# --- matches_host_pattern -----------------------------------------------------

@pytest.mark.parametrize("host", [
    "example.com", "sub.example.co", "my-site.example.org", "a1.b2.io", "EXAMPLE.COM",
])
def test_valid_hosts_match(host):
    assert matches_host_pattern(host)


@pytest.mark.parametrize("host", [
    "", "localhost", "example.c", "example.123", "-x.com", ".example.com",
    "exa mple.com", "a/b.com", "a\\b.com", "example.com\n", "ex_ample.com",
])
def test_invalid_hosts_rejected(host):
    assert not matches_host_pattern(host)


def test_pattern_alone_accepts_double_dot():
    """The blacklist is the layer that catches '..'."""
    assert matches_host_pattern("a..b.com")
    assert contains_forbidden_fragment("a..b.com")


# --- contains_forbidden_fragment ----------------------------------------------

@pytest.mark.parametrize("host", ["..", "a..com", "a/b", "a\\b"])
def test_forbidden_fragments(host):
    assert contains_forbidden_fragment(host)


def test_single_dots_allowed():
    assert not contains_forbidden_fragment("a.b.c.com")


# --- display_host -------------------------------------------------------------

def test_display_host_keeps_safe_value():
    assert display_host("localhost") == "localhost"


@pytest.mark.parametrize("host", ["", "a..b.com", "<b>.com", "a/b.com", "exa mple.com"])
def test_display_host_hides_unsafe_value(host):
    assert display_host(host) is None
