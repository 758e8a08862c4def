#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the top-level template data document."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import copy

import pytest

from library_skin.core.constants import PREF_KEY_SKIN_VERSION
from tests.conftest import SAMPLE_NAVIGATION, logged_in, make_template


PAGE = {
    "page_name": "Main Page",
    "page_title_html": "Main <i>Page</i>",
    "template_data": {
        "bodycontent": "<p>Welcome.</p>",
        "sitenotice": "<div>Maintenance tonight</div>",
        "subtitle": "",
        "undelete": "",
        "content_navigation": SAMPLE_NAVIGATION,
        "sidebar": {"navigation": [{"text": "Main page", "href": "/wiki/Main_Page", "id": "n-mainpage"}]},
        "lastmod": "Last edited today.",
    },
    "footer_links": {"info": ["lastmod"]},
    "footer_icons": {"poweredby": [{"src": "/p.png", "alt": "Powered by"}]},
    "trail": "<script>mw.loader.load([]);</script>",
}


# ── Keys ──────────────────────────────────────────────────────────────────────

EXPECTED_KEYS = {
    "html-headelement", "html-sitenotice", "html-indicators", "page-langcode",
    "page-isarticle", "html-title", "html-prebodyhtml", "msg-tagline",
    "html-userlangattributes", "html-subtitle", "html-undelete", "html-newtalk",
    "msg-library-jumptonavigation", "msg-library-jumptosearch", "html-bodycontent",
    "html-printfooter", "html-catlinks", "html-dataAfterContent", "html-debuglog",
    "html-printtail", "data-footer", "html-navigation-heading", "data-search-box",
    "data-logos", "msg-sitetitle", "msg-sitesubtitle", "main-page-href", "data-sidebar",
    "data-personal-menu", "data-namespace-tabs", "data-variants", "data-page-actions",
    "data-page-actions-more",
}


def test_all_keys_present(settings):
    data = make_template(settings, **PAGE).get_skin_data()
    assert set(data) == EXPECTED_KEYS


def test_page_fields(settings):
    data = make_template(settings, **PAGE).get_skin_data()
    assert data["html-title"] == "Main <i>Page</i>"
    assert data["html-bodycontent"] == "<p>Welcome.</p>"
    assert data["html-sitenotice"] == "<div>Maintenance tonight</div>"
    assert data["page-langcode"] == "en"
    assert data["page-isarticle"] is True
    assert data["msg-tagline"] == "From Test Wiki"
    assert data["msg-sitetitle"] == "Test Wiki"
    assert data["main-page-href"] == "/wiki/Main_Page"
    assert data["html-navigation-heading"] == "Navigation menu"
    assert data["data-logos"] == {"1x": "/static/images/library-logo.png"}


def test_title_zero_is_kept(settings):
    data = make_template(settings, page_title_html="0").get_skin_data()
    assert data["html-title"] == "0"


def test_optional_html_defaults(settings):
    data = make_template(settings).get_skin_data()
    assert data["html-sitenotice"] is None
    assert data["html-undelete"] is None
    assert data["html-newtalk"] is None
    assert data["html-prebodyhtml"] == ""
    assert data["html-subtitle"] == ""
    assert data["html-dataAfterContent"] == ""
    assert data["html-debuglog"] == ""


def test_empty_undelete_and_newtalk_become_none(settings):
    data = make_template(settings, **PAGE).get_skin_data()
    assert data["html-undelete"] is None
    assert data["html-newtalk"] is None


def test_newtalk(settings):
    data = make_template(settings, newtalk="<div>You have new messages</div>").get_skin_data()
    assert data["html-newtalk"] == "<div>You have new messages</div>"


def test_printtail_closes_document(settings):
    data = make_template(settings, **PAGE).get_skin_data()
    assert data["html-printtail"] == "<script>mw.loader.load([]);</script></body></html>"


def test_printfooter(settings):
    data = make_template(settings, **PAGE).get_skin_data()
    assert data["html-printfooter"] == (
        'Retrieved from "<a dir="ltr" href="/wiki/Main_Page">/wiki/Main_Page</a>"'
    )


def test_headelement(settings):
    head = make_template(settings, **PAGE).get_skin_data()["html-headelement"]
    assert head.startswith("<!DOCTYPE html>")
    assert "<title>Main Page - Test Wiki</title>" in head
    assert head.endswith('<body class="mediawiki ltr sitedir-ltr skin-library action-view">')


def test_menus_merged(settings):
    data = make_template(settings, **PAGE).get_skin_data()
    assert data["data-namespace-tabs"]["id"] == "p-namespaces"
    assert data["data-page-actions-more"]["label"] == "More"


# ── Search box ────────────────────────────────────────────────────────────────

def test_search_box(settings):
    search = make_template(settings).get_skin_data()["data-search-box"]
    assert search["form-action"] == "/index.php"
    assert search["form-id"] == "simpleSearch"
    assert search["msg-search"] == "Search"
    assert search["page-title"] == "Special:Search"
    assert 'id="searchButton"' in search["html-button-search"]
    assert 'name="go"' in search["html-button-search"]
    assert 'class="searchButton mw-fallbackSearchButton"' in search["html-button-search-fallback"]
    assert 'name="fulltext"' in search["html-button-search-fallback"]
    assert search["html-input"] == (
        '<input type="search" name="search" placeholder="Search Test Wiki" '
        'title="Search Test Wiki [f]" accesskey="f" id="searchInput"/>'
    )


def test_search_box_without_simple_search(settings):
    plain = settings.model_copy(update={"library_use_simple_search": False, "script": "/w/index.php"})
    search = make_template(plain).get_skin_data()["data-search-box"]
    assert search["form-id"] == ""
    assert search["form-action"] == "/w/index.php"


def test_search_input_keeps_query(settings):
    search = make_template(settings, request_params={"search": "cats"}).build_search_props()
    assert 'value="cats"' in search["html-input"]


# ── Opt-out link ──────────────────────────────────────────────────────────────

def test_opt_out_link_for_logged_in_users(settings):
    data = make_template(settings, user=logged_in()).get_skin_data()
    action = data["data-sidebar"]["data-emphasized-sidebar-action"]
    assert action == {
        "href": "/wiki/Special:Preferences?wprov=vctw1#mw-prefsection-rendering-skin-skin-prefs",
        "text": "Switch to old look",
        "title": "Change your settings to go back to the old look of the skin (legacy Library)",
    }


@pytest.mark.parametrize("is_legacy,user", [
    (True, logged_in(**{PREF_KEY_SKIN_VERSION: "1"})),
    (False, {"logged_in": False}),
])
def test_no_opt_out_link(settings, is_legacy, user):
    data = make_template(settings, is_legacy=is_legacy, user=user).get_skin_data()
    assert "data-emphasized-sidebar-action" not in data["data-sidebar"]


def test_opt_out_link_is_additive(settings):
    anon = make_template(settings, **PAGE).get_skin_data()
    user = make_template(settings, **{**PAGE, "user": logged_in()}).get_skin_data()
    assert set(user) == set(anon)
    assert set(user["data-sidebar"]) == set(anon["data-sidebar"]) | {"data-emphasized-sidebar-action"}


# ── Determinism ───────────────────────────────────────────────────────────────

def test_builder_is_deterministic(settings):
    template = make_template(settings, user=logged_in(), **PAGE)
    assert template.get_skin_data() == template.get_skin_data()


def test_builder_does_not_mutate_host_state(settings):
    template = make_template(settings, **PAGE)
    before = copy.deepcopy(template.skin.state.model_dump())
    template.get_skin_data()
    assert template.skin.state.model_dump() == before


def test_separate_hosts_same_output(settings):
    first = make_template(settings, **PAGE).get_skin_data()
    second = make_template(settings, **copy.deepcopy(PAGE)).get_skin_data()
    assert first == second


# -----------------------------------------------------------------------------
