#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 schemas for request validation and the reference host state.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from library_skin.core.constants import (
    PREF_KEY_SKIN_VERSION, SKIN_NAME, SKIN_VERSION_LATEST, SKIN_VERSION_LEGACY,
)


SKIN_VERSIONS = {SKIN_VERSION_LEGACY, SKIN_VERSION_LATEST}

# Navigation items are loose host records (text, href, class, id, ...).
NavItem = dict[str, Any]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Users
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HostUser(BaseModel):
    name: Optional[str] = None
    logged_in: bool = False
    options: dict[str, Any] = Field(default_factory=dict)


# -----------------------------------------------------------------------------

class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    is_auto_created: bool = False


# -----------------------------------------------------------------------------

class UserOptionsResponse(BaseModel):
    name: Optional[str] = None
    options: dict[str, Any]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Host state
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HostState(BaseModel):
    """Everything the reference host needs to answer the skin's accessor calls."""

    skin_name: str = SKIN_NAME
    page_name: str = "Main Page"
    # From OutputPage::getPageTitle; the string "0" is a valid title.
    page_title_html: str = "Main Page"
    page_lang_code: str = "en"
    html_lang: str = "en"
    is_article: bool = True

    user: HostUser = Field(default_factory=HostUser)
    request_params: dict[str, str] = Field(default_factory=dict)
    anonymous_can_edit: bool = True

    # Raw template data (sitenotice, bodycontent, subtitle, undelete,
    # content_navigation, sidebar, footer link HTML keyed by link name ...).
    template_data: dict[str, Any] = Field(default_factory=dict)

    personal_tools: dict[str, NavItem] = Field(default_factory=dict)
    toolbox: dict[str, NavItem] = Field(default_factory=dict)
    languages: list[NavItem] = Field(default_factory=list)
    after_portlets: dict[str, str] = Field(default_factory=dict)

    footer_links: dict[str, list[str]] = Field(default_factory=dict)
    footer_icons: dict[str, list[Union[str, dict[str, Any]]]] = Field(default_factory=dict)
    indicators: dict[str, str] = Field(default_factory=dict)

    newtalk: str = ""
    categories_html: str = ""
    trail: str = ""
    messages: dict[str, str] = Field(default_factory=dict)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Preferences
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PreferencesFormRequest(BaseModel):
    user: HostUser = Field(default_factory=HostUser)
    request_params: dict[str, str] = Field(default_factory=dict)
    sections: dict[str, dict[str, Any]] = Field(default_factory=dict)


# -----------------------------------------------------------------------------

class PreferencesSaveRequest(BaseModel):
    form_data: dict[str, Any] = Field(default_factory=dict)
    user: HostUser = Field(default_factory=HostUser)
    old_preferences: dict[str, Any] = Field(default_factory=dict)

    @field_validator("old_preferences")
    @classmethod
    def known_skin_version(cls, v: dict[str, Any]) -> dict[str, Any]:
        old = v.get(PREF_KEY_SKIN_VERSION)
        if old is not None and str(old) not in SKIN_VERSIONS:
            raise ValueError(
                f"{PREF_KEY_SKIN_VERSION} must be one of: {', '.join(sorted(SKIN_VERSIONS))}"
            )
        return v


# -----------------------------------------------------------------------------

class PreferencesSaveResponse(BaseModel):
    preference: Optional[str] = None
    options: dict[str, Any]


# -----------------------------------------------------------------------------
