#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Library template data
=====================
Builds the single nested document the page templates are rendered from.

Naming conventions for template keys.

Value type (first segment):
  - ``is-`` / ``has-``  boolean values
  - ``msg-``            interface message text
  - ``html-``           raw, already escaped HTML
  - ``data-``           a block of parameters handed to a partial
  - ``array-``          lists of any values

Source of value (first or second segment):
  - ``page-``  data about the current page
  - ``hook-``  output of a hook, followed by the hook name in
    hyphenated lowercase

Conditionally used values use ``None`` for absence, never ``False`` or ``""``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Any, Mapping

from library_skin.core.config import Settings, get_settings
from library_skin.core.constants import (
    HOOK_LIBRARY_AFTER_TOOLBOX, HOOK_LIBRARY_BEFORE_FOOTER, HOOK_SKIN_TEMPLATE_TOOLBOX_END,
    OPT_OUT_LINK_FRAGMENT, OPT_OUT_LINK_TRACKING_CODE,
    TEMPLATE_ROOT_LATEST, TEMPLATE_ROOT_LEGACY,
)
from library_skin.core.hook_registry import HookRegistry
from library_skin.core.html import ClassList, element, escape, expand_attributes, with_class
from library_skin.services.host import HostSkin
from library_skin.services.template_parser import TemplateParser

log = logging.getLogger(__name__)


# Menu keys whose label message does not share the key's name.
MENU_LABEL_KEYS = {
    "cactions": "library-more-actions",
    "tb": "toolbox",
    "personal": "personaltools",
    "lang": "otherlanguages",
}

MENU_TYPE_DEFAULT = 0
MENU_TYPE_TABS = 1
MENU_TYPE_DROPDOWN = 2
MENU_TYPE_PORTAL = 3

MENU_EXTRA_CLASSES = {
    MENU_TYPE_DROPDOWN: "library-menu library-menu-dropdown libraryMenu",
    MENU_TYPE_TABS: "library-menu library-menu-tabs libraryTabs",
    MENU_TYPE_PORTAL: "library-menu library-menu-portal portal",
    MENU_TYPE_DEFAULT: "library-menu",
}

# `.menu` stays on dropdown lists for historic stylesheets only.
MENU_LIST_CLASSES = {
    MENU_TYPE_DROPDOWN: "menu library-menu-content-list",
}
DEFAULT_LIST_CLASSES = "library-menu-content-list"

EMPTY_MENU_CLASSES = "library-menu-empty emptyPortlet"

UNCOLLAPSIBLE_KEYS = ("watch", "unwatch")


# -----------------------------------------------------------------------------

class TemplateParserNotSetError(RuntimeError):
    """The template parser was requested before one was configured."""


# -----------------------------------------------------------------------------

class LibraryTemplate:

    def __init__(
        self,
        skin: HostSkin,
        template_parser: TemplateParser | None,
        is_legacy: bool,
        settings: Settings | None = None,
        hooks: HookRegistry | None = None,
    ):
        self.skin = skin
        self.settings = settings or get_settings()
        self.hooks = hooks or HookRegistry()
        self.template_parser = template_parser
        self.is_legacy = is_legacy
        self.template_root = TEMPLATE_ROOT_LEGACY if is_legacy else TEMPLATE_ROOT_LATEST

    def get(self, key: str, default: Any = None) -> Any:
        return self.skin.get(key, default)

    def msg(self, key: str):
        return self.skin.msg(key)

    def get_template_parser(self) -> TemplateParser:
        if self.template_parser is None:
            raise TemplateParserNotSetError(
                "TemplateParser has to be set before the template can be executed"
            )
        return self.template_parser

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # Page
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def get_skin_data(self) -> dict[str, Any]:
        """Data shared by Library and legacy Library."""
        skin = self.skin
        out = skin.output

        html_hook_before_footer = self.hooks.run_html(HOOK_LIBRARY_BEFORE_FOOTER)

        data: dict[str, Any] = {
            "html-headelement": out.head_element(skin),
            "html-sitenotice": self.get("sitenotice", None),
            "html-indicators": skin.get_indicators(),
            "page-langcode": out.page_view_language_code(),
            "page-isarticle": bool(out.is_article()),

            # "0" is a valid title.
            "html-title": out.get_page_title(),

            "html-prebodyhtml": self.get("prebodyhtml", ""),
            "msg-tagline": self.msg("tagline").text(),
            "html-userlangattributes": self.get("userlangattributes", ""),
            "html-subtitle": self.get("subtitle", ""),

            # Empty strings become None.
            "html-undelete": self.get("undelete", None) or None,
            "html-newtalk": skin.get_newtalks() or None,

            "msg-library-jumptonavigation": self.msg("library-jumptonavigation").text(),
            "msg-library-jumptosearch": self.msg("library-jumptosearch").text(),

            "html-bodycontent": self.get("bodycontent", ""),

            "html-printfooter": skin.print_source(),
            "html-catlinks": skin.get_categories(),
            "html-dataAfterContent": self.get("dataAfterContent", ""),
            "html-debuglog": self.get("debughtml", ""),
            # Bottom scripts, then close the document opened by html-headelement.
            "html-printtail": skin.get_trail() + "</body></html>",
            "data-footer": {
                "html-userlangattributes": self.get("userlangattributes", ""),
                "html-hook-library-before-footer": html_hook_before_footer,
                "array-footer-rows": self.get_template_footer_rows(),
            },
            "html-navigation-heading": self.msg("navigation-heading").escaped(),
            "data-search-box": self.build_search_props(),

            # Header
            "data-logos": dict(self.settings.logos),
            "msg-sitetitle": self.msg("sitetitle").text(),
            "msg-sitesubtitle": self.msg("sitesubtitle").text(),
            "main-page-href": skin.main_page_url(),

            "data-sidebar": self.build_sidebar(),
        }
        for key, value in self.get_menu_props().items():
            data.setdefault(key, value)

        if not self.is_legacy and skin.user.is_logged_in():
            data["data-sidebar"]["data-emphasized-sidebar-action"] = {
                "href": skin.special_page_url(
                    "Preferences",
                    fragment=OPT_OUT_LINK_FRAGMENT,
                    query=f"wprov={OPT_OUT_LINK_TRACKING_CODE}",
                ),
                "text": self.msg("library-opt-out").text(),
                "title": self.msg("library-opt-out-tooltip").text(),
            }

        return data

    def execute(self) -> str:
        """Render the whole page."""
        parser = self.get_template_parser()
        return parser.process_template(self.template_root, self.get_skin_data())

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # Footer
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def get_template_footer_rows(self) -> list[dict[str, Any]]:
        footer_rows = []
        for category, links in self.skin.get_footer_links().items():
            row_id = f"footer-{category}"
            items = [
                {"id": f"{row_id}-{link}", "html": self.get(link, "")}
                for link in links
            ]
            footer_rows.append({
                "id": row_id,
                "className": None,
                "array-items": items,
            })

        footer_icons = self.skin.get_footer_icons("icononly")
        if footer_icons:
            items = []
            for block_name, block_icons in footer_icons.items():
                html = "".join(self.skin.make_footer_icon(icon) for icon in block_icons)
                items.append({
                    "id": f"footer-{escape(block_name)}ico",
                    "html": html,
                })
            footer_rows.append({
                "id": "footer-icons",
                "className": "noprint",
                "array-items": items,
            })

        return footer_rows

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # Sidebar
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def build_sidebar(self) -> dict[str, Any]:
        portals = dict(self.get("sidebar", None) or {})
        # These two portals are always rendered unless explicitly disabled.
        portals.setdefault("TOOLBOX", True)
        portals.setdefault("LANGUAGES", True)

        props: list[dict[str, Any]] = []
        for name, content in portals.items():
            if content is False:
                continue
            # Numeric portal names arrive as ints from some hosts.
            name = str(name)

            if name == "SEARCH":
                continue
            elif name == "TOOLBOX":
                portal = self.get_menu_data("tb", self.skin.get_toolbox(), MENU_TYPE_PORTAL)
                # Superseded by SidebarBeforeOutput, still run for old extensions.
                portal["html-items"] += self.hooks.run_html(HOOK_SKIN_TEMPLATE_TOOLBOX_END, self, True)
                portal["html-hook-library-after-toolbox"] = self.hooks.run_html(HOOK_LIBRARY_AFTER_TOOLBOX)
                props.append(portal)
            elif name == "LANGUAGES":
                languages = self.skin.get_languages()
                portal = self.get_menu_data("lang", languages, MENU_TYPE_PORTAL)
                # Kept with no languages when there is after-portal content,
                # e.g. an "add links" prompt.
                if languages or portal["html-after-portal"]:
                    props.append(portal)
            else:
                if isinstance(content, (list, dict)):
                    html = None
                else:
                    # Portals used to be allowed to carry raw HTML.
                    html = content if isinstance(content, str) else None
                    content = {}
                    log.warning(
                        "`content` field in portal %s must be array. "
                        "Previously it could be a string but this is no longer supported. "
                        "(deprecated in 1.35.0)",
                        name,
                    )
                portal = self.get_menu_data(name, content, MENU_TYPE_PORTAL)
                if html:
                    portal["html-items"] += html
                props.append(portal)

        first_portal = dict(props[0]) if props else None
        if first_portal:
            first_portal["class"] = str(ClassList(first_portal["class"]).add("portal-first"))

        logo_attribs = {
            **self.skin.tooltip_and_accesskey_attribs("p-logo"),
            "class": "mw-wiki-logo",
            "href": self.skin.main_page_url(),
        }
        return {
            "has-logo": self.is_legacy,
            "html-logo-attributes": expand_attributes(logo_attribs),
            "array-portals-rest": props[1:],
            "data-portals-first": first_portal,
            "msg-library-action-toggle-sidebar": self.msg("library-action-toggle-sidebar").text(),
            # TODO: read a stored preference once the sidebar state is persisted per user.
            "sidebar-visible": True,
        }

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # Menus
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def get_menu_data(
        self,
        label: str,
        urls: Mapping[Any, Mapping[str, Any]] | list | None = None,
        menu_type: int = MENU_TYPE_DEFAULT,
        options: Mapping[str, Any] | None = None,
        set_label_to_selected: bool = False,
    ) -> dict[str, Any]:
        """Descriptor for one menu or portal.

        *label* gives both the element id (``p-<label>``) and the message
        used for the visible label; MENU_LABEL_KEYS maps the keys whose
        message is named differently.  *urls* become ``html-items`` via the
        host's list item renderer.  With *set_label_to_selected* the label
        becomes the text of the item whose class contains "selected".
        """
        options = dict(options or {})
        if isinstance(urls, list):
            urls = dict(enumerate(urls))
        urls = urls or {}
        is_portal = menu_type == MENU_TYPE_PORTAL

        message = self.msg(MENU_LABEL_KEYS.get(label, label))
        props: dict[str, Any] = {
            "id": f"p-{label}",
            "label-id": f"p-{label}-label",
            # Plain label text when no message exists.
            "label": message.text() if message.exists() else label,
            "html-userlangattributes": self.get("userlangattributes", ""),
            "list-classes": MENU_LIST_CLASSES.get(menu_type, DEFAULT_LIST_CLASSES),
            "html-items": "",
            "is-dropdown": menu_type == MENU_TYPE_DROPDOWN,
            "html-tooltip": self.skin.tooltip(f"p-{label}"),
        }

        collapsible = bool(options.get("library-collapsible"))
        for key, item in urls.items():
            if collapsible and key not in UNCOLLAPSIBLE_KEYS:
                item = with_class(item, "collapsible")
            props["html-items"] += self.skin.make_list_item(key, item, options)

            if set_label_to_selected and ClassList(item.get("class") or "").contains_substring("selected"):
                props["label"] = item.get("text", props["label"])

        props["html-after-portal"] = self.skin.get_after_portlet(label) if is_portal else ""

        classes = ClassList()
        if not urls and not props["html-after-portal"]:
            classes.add(*EMPTY_MENU_CLASSES.split())
        classes.add(*MENU_EXTRA_CLASSES[menu_type].split())
        props["class"] = str(classes)
        return props

    def get_menu_props(self) -> dict[str, Any]:
        content_navigation = self.get("content_navigation", None) or {}
        personal_tools = self.skin.get_personal_tools()
        skin = self.skin

        # Anonymous visitors see a "Not logged in" entry when they may edit.
        if not skin.user.is_logged_in() and skin.anonymous_can_edit():
            logged_in = element("li", {"id": "pt-anonuserpage"}, self.msg("notloggedin").text())
        else:
            logged_in = ""

        # The language selector wants to be first in the personal menu.
        if "uls" in personal_tools:
            uls = skin.make_list_item("uls", personal_tools.pop("uls"))
        else:
            uls = ""

        ptools = self.get_menu_data("personal", personal_tools)
        ptools["html-items"] = uls + logged_in + ptools["html-items"]

        return {
            "data-personal-menu": ptools,
            "data-namespace-tabs": self.get_menu_data(
                "namespaces",
                content_navigation.get("namespaces", {}),
                MENU_TYPE_TABS,
            ),
            "data-variants": self.get_menu_data(
                "variants",
                content_navigation.get("variants", {}),
                MENU_TYPE_DROPDOWN,
                {},
                True,
            ),
            "data-page-actions": self.get_menu_data(
                "views",
                content_navigation.get("views", {}),
                MENU_TYPE_TABS,
                {"library-collapsible": True},
            ),
            "data-page-actions-more": self.get_menu_data(
                "cactions",
                content_navigation.get("actions", {}),
                MENU_TYPE_DROPDOWN,
            ),
        }

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # Search
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def build_search_props(self) -> dict[str, Any]:
        return {
            "form-action": self.settings.script,
            "form-id": "simpleSearch" if self.settings.library_use_simple_search else "",
            "html-button-search-fallback": self.skin.make_search_button(
                "fulltext",
                {"id": "mw-searchButton", "class": "searchButton mw-fallbackSearchButton"},
            ),
            "html-button-search": self.skin.make_search_button(
                "go",
                {"id": "searchButton", "class": "searchButton"},
            ),
            "html-input": self.skin.make_search_input({"id": "searchInput"}),
            "msg-search": self.msg("search").text(),
            "page-title": self.skin.special_page_prefixed_dbkey("Search"),
        }


# -----------------------------------------------------------------------------
