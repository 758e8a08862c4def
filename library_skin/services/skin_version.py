#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Skin version lookup.

Precedence, highest first:
  1. ``?useskinversion=`` request parameter
  2. the user's stored ``LibrarySkinVersion`` option
  3. ``library_default_skin_version`` from settings
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from library_skin.core.config import Settings, get_settings
from library_skin.core.constants import (
    PREF_KEY_SKIN_VERSION, QUERY_PARAM_SKIN_VERSION, SKIN_VERSION_LEGACY,
)
from library_skin.services.host import Request, User


# -----------------------------------------------------------------------------

class SkinVersionLookup:

    def __init__(self, request: Request, user: User, settings: Settings | None = None):
        self.request = request
        self.user = user
        self.settings = settings or get_settings()

    def get_version(self) -> str:
        version = self.request.get_val(QUERY_PARAM_SKIN_VERSION)
        if version is None:
            version = self.user.get_option(PREF_KEY_SKIN_VERSION)
        if version is None:
            version = self.settings.library_default_skin_version
        return str(version)

    def is_legacy(self) -> bool:
        return self.get_version() == SKIN_VERSION_LEGACY


# -----------------------------------------------------------------------------
