#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render endpoints — run the skin against a posted host state.

POST /api/v1/render        — full HTML page
POST /api/v1/render/data   — the template data document as JSON
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from library_skin.core.config import Settings, get_settings
from library_skin.core.constants import HOOK_BEFORE_PAGE_DISPLAY_MOBILE, HOOK_SKIN_TEMPLATE_NAVIGATION
from library_skin.core.hook_registry import HookRegistry
from library_skin.schemas import HostState
from library_skin.services.host import StaticSkin
from library_skin.services.skin import SkinLibrary
from library_skin.services.template_parser import TemplateParser
from library_skin.routes.deps import get_hooks, get_template_parser


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/render", tags=["render"])


# -----------------------------------------------------------------------------

def _prepare_skin(
    state: HostState,
    mobile: bool,
    settings: Settings,
    hooks: HookRegistry,
    parser: TemplateParser | None,
) -> SkinLibrary:
    """Build the request-scoped host and skin, then run the pre-render hooks."""
    host = StaticSkin(state, settings)
    skin = SkinLibrary(host, settings=settings, template_parser=parser, hooks=hooks)

    navigation = host.get("content_navigation", None) or {}
    state.template_data["content_navigation"] = hooks.apply(
        HOOK_SKIN_TEMPLATE_NAVIGATION, navigation, skin
    )
    if mobile:
        hooks.run(HOOK_BEFORE_PAGE_DISPLAY_MOBILE, host.output, skin)
    return skin


# -----------------------------------------------------------------------------

@router.post("", response_class=HTMLResponse)
async def render_page(
    state: HostState,
    mobile: bool = Query(default=False),
    settings: Settings = Depends(get_settings),
    hooks: HookRegistry = Depends(get_hooks),
    parser: TemplateParser = Depends(get_template_parser),
):
    """Render a complete page with the Library skin."""
    skin = _prepare_skin(state, mobile, settings, hooks, parser)
    return HTMLResponse(skin.render())


# -----------------------------------------------------------------------------

@router.post("/data")
async def render_data(
    state: HostState,
    mobile: bool = Query(default=False),
    settings: Settings = Depends(get_settings),
    hooks: HookRegistry = Depends(get_hooks),
):
    """Return the template data the page would be rendered from."""
    skin = _prepare_skin(state, mobile, settings, hooks, None)
    template = skin.get_template()
    return {"template": template.template_root, "data": template.get_skin_data()}


# -----------------------------------------------------------------------------
