#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
SkinLibrary: the skin object handed to hooks and asked to render a page.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from library_skin.core.config import Settings, get_settings
from library_skin.core.constants import DEPRECATED_HOOKS, RESPONSIVE_BODY_CLASS, SKIN_NAME
from library_skin.core.hook_registry import HookRegistry
from library_skin.services.host import HostSkin
from library_skin.services.skin_version import SkinVersionLookup
from library_skin.services.template import LibraryTemplate
from library_skin.services.template_parser import TemplateParser


# -----------------------------------------------------------------------------

class SkinLibrary:

    skin_name = SKIN_NAME

    def __init__(
        self,
        host: HostSkin,
        settings: Settings | None = None,
        template_parser: TemplateParser | None = None,
        hooks: HookRegistry | None = None,
    ):
        self.host = host
        self.settings = settings or get_settings()
        self.template_parser = template_parser
        self.hooks = hooks or HookRegistry(deprecated=DEPRECATED_HOOKS)
        self.responsive = False
        if self.settings.library_responsive:
            self.enable_responsive_mode()

    def enable_responsive_mode(self) -> None:
        if self.responsive:
            return
        self.responsive = True
        self.host.output.add_meta("viewport", "width=device-width, initial-scale=1")
        self.host.output.add_body_classes(RESPONSIVE_BODY_CLASS)

    def is_legacy(self) -> bool:
        return SkinVersionLookup(self.host.request, self.host.user, self.settings).is_legacy()

    def get_template(self) -> LibraryTemplate:
        return LibraryTemplate(
            self.host,
            self.template_parser,
            self.is_legacy(),
            settings=self.settings,
            hooks=self.hooks,
        )

    def render(self) -> str:
        return self.get_template().execute()


# -----------------------------------------------------------------------------
