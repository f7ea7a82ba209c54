"""Service test fixtures — temporary site root + FastAPI test client.

Invariants:
    - Every test gets a fresh, empty site root under tmp_path
    - get_settings cache cleared around each test so SITE_ROOT is re-read

Design Decisions:
    - Site root set through the environment, not dependency_overrides: the route
      and the error handlers both read get_settings() directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from domain_router.config import get_settings
from domain_router.main import app


@pytest.fixture
def site_root(tmp_path, monkeypatch):
    root = tmp_path / "sites"
    root.mkdir()
    monkeypatch.setenv("SITE_ROOT", str(root))
    get_settings.cache_clear()
    yield root
    get_settings.cache_clear()


@pytest.fixture
def make_site(site_root):
    """Write <root>/<host>/index.html and return its raw bytes."""
    def _make(host: str, html: str | bytes) -> bytes:
        site_dir = site_root / host
        site_dir.mkdir(parents=True, exist_ok=True)
        data = html.encode("utf-8") if isinstance(html, str) else html
        (site_dir / "index.html").write_bytes(data)
        return data
    return _make


@pytest.fixture
def landing_page(site_root):
    data = "<html><body>Landing</body></html>".encode("utf-8")
    (site_root / "index.html").write_bytes(data)
    return data


@pytest.fixture
async def client(site_root):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
