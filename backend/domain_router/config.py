"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Tenant mapping is never configured here: it is implied by directory names

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Empty site_root means "working directory at access time", matching a
      deployment where the process is started inside the site root
"""

import os
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain_router.core.site_paths import normalize_root


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Sites
    site_root: str = ""

    @field_validator("site_root", mode="before")
    @classmethod
    def strip_site_root(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v

    # Response headers
    cache_max_age: int = 3600
    cache_stale_while_revalidate: int = 7200
    powered_by: str = "Domain-Router/1.0"

    # Not-found page
    support_url: str | None = None

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def root_dir(self) -> str:
        return normalize_root(self.site_root or os.getcwd())

    @property
    def page_cache_control(self) -> str:
        return (
            f"public, max-age={self.cache_max_age}, "
            f"stale-while-revalidate={self.cache_stale_while_revalidate}"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
