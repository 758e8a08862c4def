#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
FastAPI dependencies shared by the routers.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from library_skin.core.config import Settings, get_settings
from library_skin.core.hook_registry import HookRegistry
from library_skin.services.hooks import build_registry
from library_skin.services.template_parser import TemplateParser


# -----------------------------------------------------------------------------

def get_hooks(settings: Settings = Depends(get_settings)) -> HookRegistry:
    return build_registry(settings)


# -----------------------------------------------------------------------------

@lru_cache
def get_template_parser() -> TemplateParser:
    return TemplateParser()


# -----------------------------------------------------------------------------
