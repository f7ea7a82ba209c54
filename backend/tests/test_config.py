"""Settings tests — site root resolution and derived header values."""

import os

from domain_router.config import Settings


def test_empty_site_root_means_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert Settings(site_root="").root_dir == os.getcwd()


def test_site_root_whitespace_stripped(tmp_path):
    assert Settings(site_root=f"  {tmp_path}/  ").root_dir == str(tmp_path)


def test_site_root_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("SITE_ROOT", str(tmp_path))
    assert Settings().root_dir == str(tmp_path)


def test_default_page_cache_control():
    assert Settings().page_cache_control == (
        "public, max-age=3600, stale-while-revalidate=7200"
    )


def test_defaults():
    settings = Settings()
    assert settings.powered_by == "Domain-Router/1.0"
    assert settings.support_url is None
