#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Host contracts and the reference host
=====================================
The skin never builds links, icons or tooltips itself: it asks the host.
``HostSkin`` lists every accessor the template builder and hooks call.

``StaticSkin`` is a request-scoped host built from a ``HostState`` document.
It backs the HTTP endpoints and the test-suite; a real wiki plugs in its own
objects with the same methods.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from library_skin.core.config import Settings, get_settings
from library_skin.core.html import ClassList, element, escape, expand_attributes, raw_element
from library_skin.schemas import HostState, HostUser
from library_skin.services.messages import Message, MessageCatalog


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Contracts
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class User(Protocol):
    def is_logged_in(self) -> bool: ...
    def get_option(self, key: str, default: Any = None) -> Any: ...
    def set_option(self, key: str, value: Any) -> None: ...


class Request(Protocol):
    def get_val(self, name: str, default: Any = None) -> Any: ...


class Output(Protocol):
    def add_meta(self, name: str, content: str) -> None: ...
    def add_body_classes(self, *classes: str) -> None: ...
    def head_element(self, skin: Any) -> str: ...
    def is_article(self) -> bool: ...
    def get_page_title(self) -> str: ...
    def page_view_language_code(self) -> str: ...


class HostSkin(Protocol):
    user: User
    request: Request
    output: Output

    def get(self, key: str, default: Any = None) -> Any: ...
    def msg(self, key: str, *params: Any) -> Message: ...
    def make_list_item(self, key: Any, item: Mapping[str, Any],
                       options: Optional[Mapping[str, Any]] = None) -> str: ...
    def make_footer_icon(self, icon: Any) -> str: ...
    def make_search_button(self, mode: str, attrs: Mapping[str, Any]) -> str: ...
    def make_search_input(self, attrs: Mapping[str, Any]) -> str: ...
    def tooltip(self, name: str) -> str: ...
    def tooltip_and_accesskey_attribs(self, name: str) -> dict[str, str]: ...
    def get_after_portlet(self, name: str) -> str: ...
    def get_personal_tools(self) -> dict[str, dict]: ...
    def get_toolbox(self) -> dict[str, dict]: ...
    def get_languages(self) -> list[dict]: ...
    def get_footer_links(self) -> dict[str, list[str]]: ...
    def get_footer_icons(self, option: Optional[str] = None) -> dict[str, list]: ...
    def get_indicators(self) -> str: ...
    def get_trail(self) -> str: ...
    def get_newtalks(self) -> str: ...
    def print_source(self) -> str: ...
    def get_categories(self) -> str: ...
    def main_page_url(self) -> str: ...
    def special_page_url(self, name: str, fragment: str = "", query: str = "") -> str: ...
    def special_page_prefixed_dbkey(self, name: str) -> str: ...
    def anonymous_can_edit(self) -> bool: ...


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Reference implementation
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class StaticUser:

    def __init__(self, name: str | None = None, logged_in: bool = False,
                 options: Mapping[str, Any] | None = None):
        self.name = name
        self.logged_in = logged_in
        self.options: dict[str, Any] = dict(options or {})

    @classmethod
    def from_schema(cls, data: HostUser) -> "StaticUser":
        return cls(data.name, data.logged_in, data.options)

    def is_logged_in(self) -> bool:
        return self.logged_in

    def get_option(self, key: str, default: Any = None) -> Any:
        return self.options.get(key, default)

    def set_option(self, key: str, value: Any) -> None:
        self.options[key] = value


# -----------------------------------------------------------------------------

class StaticRequest:

    def __init__(self, params: Mapping[str, str] | None = None):
        self.params = dict(params or {})

    def get_val(self, name: str, default: Any = None) -> Any:
        return self.params.get(name, default)


# -----------------------------------------------------------------------------

class StaticOutput:

    def __init__(self, state: HostState, site_name: str):
        self._state = state
        self._site_name = site_name
        self.metas: list[tuple[str, str]] = []
        self.body_classes = ClassList(["mediawiki", "ltr", "sitedir-ltr"])

    def add_meta(self, name: str, content: str) -> None:
        if (name, content) not in self.metas:
            self.metas.append((name, content))

    def add_body_classes(self, *classes: str) -> None:
        self.body_classes.add(*classes)

    def is_article(self) -> bool:
        return self._state.is_article

    def get_page_title(self) -> str:
        return self._state.page_title_html

    def page_view_language_code(self) -> str:
        return self._state.page_lang_code

    def head_element(self, skin: Any) -> str:
        skin_name = getattr(skin, "skin_name", self._state.skin_name)
        body_classes = ClassList(self.body_classes).add(f"skin-{skin_name}", "action-view")
        metas = "".join(
            f'<meta name="{escape(name)}" content="{escape(content)}"/>\n'
            for name, content in self.metas
        )
        return (
            "<!DOCTYPE html>\n"
            f'<html class="client-nojs" lang="{escape(self._state.html_lang)}" dir="ltr">\n'
            "<head>\n"
            '<meta charset="UTF-8"/>\n'
            f"<title>{escape(self._state.page_name)} - {escape(self._site_name)}</title>\n"
            f"{metas}"
            "</head>\n"
            f'<body class="{escape(str(body_classes))}">'
        )


# -----------------------------------------------------------------------------

class StaticSkin:
    """Host accessors answered from a ``HostState`` document."""

    def __init__(self, state: HostState, settings: Settings | None = None):
        self.state = state
        self.settings = settings or get_settings()
        self.skin_name = state.skin_name
        self.user = StaticUser.from_schema(state.user)
        self.request = StaticRequest(state.request_params)
        self.output = StaticOutput(state, self.settings.site_name)
        self._messages = MessageCatalog(self.settings.site_name, state.messages)

    # ── Template data / messages ──────────────────────────────────────────

    def get(self, key: str, default: Any = None) -> Any:
        return self.state.template_data.get(key, default)

    def msg(self, key: str, *params: Any) -> Message:
        return self._messages.msg(key, *params)

    # ── URLs ──────────────────────────────────────────────────────────────

    def _article_url(self, title: str) -> str:
        return self.settings.article_path.replace("$1", title.replace(" ", "_"))

    def main_page_url(self) -> str:
        return self._article_url("Main Page")

    def special_page_prefixed_dbkey(self, name: str) -> str:
        return f"Special:{name}"

    def special_page_url(self, name: str, fragment: str = "", query: str = "") -> str:
        url = self._article_url(self.special_page_prefixed_dbkey(name))
        if query:
            url += f"?{query}"
        if fragment:
            url += f"#{fragment}"
        return url

    # ── Tooltips ──────────────────────────────────────────────────────────

    def _title_attrib(self, name: str) -> str | None:
        message = self.msg(f"tooltip-{name}")
        if message.is_disabled():
            return None
        title = message.text()
        accesskey = self._accesskey(name)
        if accesskey:
            title += f" [{accesskey}]"
        return title

    def _accesskey(self, name: str) -> str | None:
        message = self.msg(f"accesskey-{name}")
        return None if message.is_disabled() else message.text()

    def tooltip(self, name: str) -> str:
        return expand_attributes({"title": self._title_attrib(name)})

    def tooltip_and_accesskey_attribs(self, name: str) -> dict[str, str]:
        attribs = {"title": self._title_attrib(name), "accesskey": self._accesskey(name)}
        return {k: v for k, v in attribs.items() if v}

    # ── Navigation ────────────────────────────────────────────────────────

    def make_link(self, key: Any, item: Mapping[str, Any],
                  options: Mapping[str, Any] | None = None) -> str:
        options = options or {}
        text = item.get("text")
        if text is None:
            text = self.msg(item.get("msg", str(key))).text()

        if "href" in item or options.get("link-fallback"):
            attrs: dict[str, Any] = {"href": item.get("href")}
            single_id = item.get("single-id")
            if single_id:
                attrs.update(self.tooltip_and_accesskey_attribs(single_id))
            if item.get("title"):
                attrs["title"] = item["title"]
            link_class = ClassList(item.get("link-class") or "").add(
                *ClassList(options.get("link-class") or "")
            )
            attrs["class"] = link_class or None
            for name in ("rel", "lang", "hreflang", "target"):
                if item.get(name):
                    attrs[name] = item[name]
            html = raw_element("a", attrs, escape(text))
        else:
            html = element("span", None, text)

        wrapper = options.get("text-wrapper")
        if wrapper:
            html = raw_element(wrapper.get("tag", "span"), wrapper.get("attributes"), html)
        return html

    def make_list_item(self, key: Any, item: Mapping[str, Any],
                       options: Mapping[str, Any] | None = None) -> str:
        options = options or {}
        if item.get("links"):
            links = [dict(link) for link in item["links"]]
        else:
            link = dict(item)
            for name in ("id", "class", "itemtitle", "links"):
                link.pop(name, None)
            links = [link]
        if item.get("id") and not item.get("single-id"):
            for link in links:
                link.setdefault("single-id", item["id"])

        html = "".join(self.make_link(key, link, options) for link in links)
        attrs = {
            "id": item.get("id"),
            "class": ClassList(item.get("class") or "") or None,
            "title": item.get("itemtitle"),
        }
        return raw_element(options.get("tag", "li"), attrs, html)

    def get_personal_tools(self) -> dict[str, dict]:
        return {k: dict(v) for k, v in self.state.personal_tools.items()}

    def get_toolbox(self) -> dict[str, dict]:
        return {k: dict(v) for k, v in self.state.toolbox.items()}

    def get_languages(self) -> list[dict]:
        return [dict(lang) for lang in self.state.languages]

    def get_after_portlet(self, name: str) -> str:
        content = self.state.after_portlets.get(name, "")
        if not content:
            return ""
        return raw_element("div", {"class": f"after-portlet after-portlet-{name}"}, content)

    # ── Search ────────────────────────────────────────────────────────────

    def make_search_input(self, attrs: Mapping[str, Any]) -> str:
        merged = {
            "type": "search",
            "name": "search",
            "placeholder": self.msg("searchsuggest-search").text(),
            **self.tooltip_and_accesskey_attribs("search"),
            **attrs,
        }
        value = self.request.get_val("search")
        if value:
            merged["value"] = value
        return f"<input{expand_attributes(merged)}/>"

    def make_search_button(self, mode: str, attrs: Mapping[str, Any]) -> str:
        if mode not in ("go", "fulltext"):
            raise ValueError(f"Unknown search button mode: {mode!r}")
        label = "searcharticle" if mode == "go" else "searchbutton"
        merged = {
            "type": "submit",
            "name": mode,
            "value": self.msg(label).text(),
            **self.tooltip_and_accesskey_attribs(f"search-{mode}"),
            **attrs,
        }
        return f"<input{expand_attributes(merged)}/>"

    # ── Footer ────────────────────────────────────────────────────────────

    def get_footer_links(self) -> dict[str, list[str]]:
        links: dict[str, list[str]] = {}
        for category, names in self.state.footer_links.items():
            present = [n for n in names if self.get(n)]
            if present:
                links[category] = present
        return links

    def get_footer_icons(self, option: Optional[str] = None) -> dict[str, list]:
        icons: dict[str, list] = {}
        for block, block_icons in self.state.footer_icons.items():
            if option == "icononly":
                block_icons = [i for i in block_icons if isinstance(i, dict) and i.get("src")]
            if block_icons:
                icons[block] = list(block_icons)
        return icons

    def make_footer_icon(self, icon: Any) -> str:
        if isinstance(icon, str):
            return icon
        if icon.get("src"):
            attrs = {
                "src": icon["src"],
                "alt": icon.get("alt", ""),
                "width": icon.get("width"),
                "height": icon.get("height"),
                "loading": "lazy",
            }
            html = f"<img{expand_attributes(attrs)}/>"
        else:
            html = escape(icon.get("alt", ""))
        if icon.get("url"):
            html = raw_element("a", {"href": icon["url"]}, html)
        return html

    # ── Page furniture ────────────────────────────────────────────────────

    def get_indicators(self) -> str:
        inner = "".join(
            raw_element("div", {"id": f"mw-indicator-{name}", "class": "mw-indicator"}, html)
            for name, html in self.state.indicators.items()
        )
        return raw_element("div", {"class": "mw-indicators mw-body-content"}, f"\n{inner}\n") + "\n"

    def get_trail(self) -> str:
        return self.state.trail

    def get_newtalks(self) -> str:
        return self.state.newtalk

    def print_source(self) -> str:
        url = self._article_url(self.state.page_name)
        link = raw_element("a", {"dir": "ltr", "href": url}, escape(url))
        return self.msg("retrievedfrom").params(link).text()

    def get_categories(self) -> str:
        if self.state.categories_html:
            return self.state.categories_html
        return raw_element(
            "div",
            {"id": "catlinks", "class": "catlinks catlinks-allhidden", "data-mw": "interface"},
        )

    def anonymous_can_edit(self) -> bool:
        return self.state.anonymous_can_edit


# -----------------------------------------------------------------------------
