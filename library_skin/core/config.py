#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Skin configuration.

All values can be overridden via environment variables or a .env file,
e.g. ``LIBRARY_USE_ICON_WATCH=false``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from library_skin._version import __version__ as _pkg_version
from library_skin.core.constants import SKIN_VERSION_LATEST


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "Library"
    app_version: str = _pkg_version
    debug: bool = False
    environment: Literal["development", "testing", "production"] = "development"

    # ── Host ───────────────────────────────────────────────────────────────

    site_name: str = "Library Wiki"
    script: str = "/index.php"
    article_path: str = "/wiki/$1"
    logos: dict[str, str] = Field(
        default_factory=lambda: {"1x": "/static/images/library-logo.png"}
    )

    # ── Skin behaviour ─────────────────────────────────────────────────────

    library_use_icon_watch: bool = True
    library_use_simple_search: bool = True
    library_show_skin_preferences: bool = True
    library_default_skin_version: str = SKIN_VERSION_LATEST
    library_default_skin_version_for_new_accounts: str = SKIN_VERSION_LATEST
    library_responsive: bool = False


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
