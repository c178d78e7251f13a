#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Application configuration.

All values can be overridden via environment variables (prefixed ``FLATWIKI_``)
or a .env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from flatwiki._version import __version__ as _pkg_version


# -----------------------------------------------------------------------------

_PACKAGE_DIR = Path(__file__).resolve().parent.parent


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="FLATWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "FlatWiki"
    app_version: str = _pkg_version
    debug: bool = False
    environment: Literal["development", "testing", "production"] = "development"

    # ── Server ─────────────────────────────────────────────────────────────

    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"

    # ── Storage ────────────────────────────────────────────────────────────

    data_dir: Path = Path("./data")
    page_suffix: str = ".txt"
    page_file_mode: int = 0o600

    # ── Wiki defaults ──────────────────────────────────────────────────────

    site_name: str = "FlatWiki"
    front_page: str = "FrontPage"
    template_dir: Path = _PACKAGE_DIR / "templates"


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
