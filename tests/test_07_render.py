#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for rendering whole pages through the Jinja2 templates."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
from jinja2 import TemplateNotFound

from library_skin.core.constants import PREF_KEY_SKIN_VERSION
from library_skin.services.template import TemplateParserNotSetError
from tests.conftest import SAMPLE_NAVIGATION, logged_in, make_skin, make_template


STATE = {
    "page_title_html": "Main Page",
    "template_data": {
        "bodycontent": "<p>Welcome to <b>Test Wiki</b>.</p>",
        "content_navigation": SAMPLE_NAVIGATION,
        "sidebar": {"navigation": [{"text": "Main page", "href": "/wiki/Main_Page", "id": "n-mainpage"}]},
        "lastmod": "Last edited today.",
    },
    "footer_links": {"info": ["lastmod"]},
    "toolbox": {"upload": {"text": "Upload file", "href": "/wiki/Special:Upload", "id": "t-upload"}},
}


# ── Parser contract ───────────────────────────────────────────────────────────

def test_execute_without_parser_fails(settings):
    with pytest.raises(TemplateParserNotSetError):
        make_template(settings).execute()


def test_unknown_template(parser):
    with pytest.raises(TemplateNotFound):
        parser.process_template("no-such-root", {})


# ── Latest ────────────────────────────────────────────────────────────────────

def test_render_latest(settings, parser):
    html = make_skin(settings, parser, **STATE).render()
    assert html.startswith("<!DOCTYPE html>")
    assert html.rstrip().endswith("</body></html>")
    assert 'class="mw-page-container"' in html
    assert "<p>Welcome to <b>Test Wiki</b>.</p>" in html
    assert '<nav id="p-personal"' in html
    assert '<nav id="p-navigation" class="library-menu library-menu-portal portal portal-first"' in html
    assert '<li id="t-upload"><a href="/wiki/Special:Upload">Upload file</a></li>' in html
    assert '<li id="footer-info-lastmod">Last edited today.</li>' in html
    assert 'id="simpleSearch"' in html
    assert 'id="p-logo"' in html


def test_render_latest_opt_out_link(settings, parser):
    html = make_skin(settings, parser, user=logged_in(), **STATE).render()
    assert 'class="library-sidebar-action"' in html
    assert "wprov=vctw1" in html


def test_render_escapes_text(settings, parser):
    html = make_skin(settings, parser, messages={"sitetitle": "<Tom & Jerry>"}, **STATE).render()
    assert "&lt;Tom &amp; Jerry&gt;" in html
    assert "<Tom & Jerry>" not in html


def test_dropdown_checkbox(settings, parser):
    html = make_skin(settings, parser, **STATE).render()
    assert 'class="library-menu-checkbox" aria-labelledby="p-cactions-label"' in html


# ── Legacy ────────────────────────────────────────────────────────────────────

def test_render_legacy(settings, parser):
    user = logged_in(**{PREF_KEY_SKIN_VERSION: "1"})
    html = make_skin(settings, parser, user=user, **STATE).render()
    assert 'id="mw-page-base"' in html
    assert 'class="mw-page-container"' not in html
    assert '<a title="Visit the main page" class="mw-wiki-logo" href="/wiki/Main_Page"></a>' in html
    assert "library-sidebar-action" not in html


def test_render_legacy_from_request(settings, parser):
    html = make_skin(settings, parser, request_params={"useskinversion": "1"}, **STATE).render()
    assert 'id="mw-page-base"' in html


# ── Responsive ────────────────────────────────────────────────────────────────

def test_render_responsive(settings, parser):
    skin = make_skin(settings, parser, **STATE)
    skin.enable_responsive_mode()
    html = skin.render()
    assert 'name="viewport"' in html
    assert "skin-library-responsive" in html


# ── Determinism ───────────────────────────────────────────────────────────────

def test_render_twice_identical(settings, parser):
    skin = make_skin(settings, parser, user=logged_in(), **STATE)
    assert skin.render() == skin.render()


# -----------------------------------------------------------------------------
