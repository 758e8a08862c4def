#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for the Library skin tests.
Every test builds its own request-scoped host from a ``HostState``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from library_skin.core.config import Settings, get_settings
from library_skin.main import create_app
from library_skin.schemas import HostState
from library_skin.services.host import StaticSkin
from library_skin.services.skin import SkinLibrary
from library_skin.services.template import LibraryTemplate
from library_skin.services.template_parser import TemplateParser


# -----------------------------------------------------------------------------

@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, environment="testing", site_name="Test Wiki")


@pytest.fixture(scope="session")
def parser() -> TemplateParser:
    return TemplateParser()


@pytest_asyncio.fixture(scope="function")
async def client(settings):
    """HTTP test client with settings isolated from the environment."""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
# Helper functions for tests
# -----------------------------------------------------------------------------

def make_host(settings: Settings, **state) -> StaticSkin:
    return StaticSkin(HostState(**state), settings)


def make_template(settings: Settings, is_legacy: bool = False, hooks=None,
                  parser: TemplateParser | None = None, **state) -> LibraryTemplate:
    return LibraryTemplate(make_host(settings, **state), parser, is_legacy,
                           settings=settings, hooks=hooks)


def make_skin(settings: Settings, parser: TemplateParser | None = None, **state) -> SkinLibrary:
    return SkinLibrary(make_host(settings, **state), settings=settings, template_parser=parser)


def logged_in(**options) -> dict:
    return {"name": "Alice", "logged_in": True, "options": options}


SAMPLE_NAVIGATION = {
    "namespaces": {
        "main": {"text": "Page", "href": "/wiki/Main_Page", "class": "selected", "id": "ca-nstab-main"},
        "talk": {"text": "Discussion", "href": "/wiki/Talk:Main_Page", "class": "new", "id": "ca-talk"},
    },
    "views": {
        "view": {"text": "Read", "href": "/wiki/Main_Page", "class": "selected", "id": "ca-view"},
        "edit": {"text": "Edit", "href": "/index.php?action=edit", "id": "ca-edit"},
    },
    "actions": {
        "watch": {"text": "Watch", "href": "/index.php?action=watch", "class": "mw-watchlink", "id": "ca-watch"},
        "move": {"text": "Move", "href": "/wiki/Special:MovePage/Main_Page", "id": "ca-move"},
    },
    "variants": {},
}


# -----------------------------------------------------------------------------
