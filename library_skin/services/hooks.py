#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Presentation hook handlers
==========================
BeforePageDisplayMobile   — responsive layout under the mobile format
SkinTemplateNavigation    — promote watch/unwatch to an icon in "views"
GetPreferences            — add the skin version toggle below "skin"
PreferencesFormPreSave    — turn the toggle back into a version string
LocalUserCreated          — give new accounts the default version

Handlers that reshape host mappings return an updated copy; the caller
replaces its own.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Mapping

from library_skin.core.config import Settings, get_settings
from library_skin.core.constants import (
    DEPRECATED_HOOKS, HOOK_BEFORE_PAGE_DISPLAY_MOBILE, HOOK_GET_PREFERENCES,
    HOOK_LOCAL_USER_CREATED, HOOK_PREFERENCES_FORM_PRE_SAVE, HOOK_SKIN_TEMPLATE_NAVIGATION,
    PREF_KEY_SKIN_VERSION, SKIN_NAME, SKIN_VERSION_LATEST, SKIN_VERSION_LEGACY,
)
from library_skin.core.hook_registry import HookRegistry
from library_skin.core.html import with_class
from library_skin.services.host import Request, StaticRequest, User
from library_skin.services.skin import SkinLibrary
from library_skin.services.skin_version import SkinVersionLookup

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def on_before_page_display_mobile(out: Any, sk: Any) -> None:
    """Make Library behave responsively when the mobile format is in use."""
    if isinstance(sk, SkinLibrary):
        sk.enable_responsive_mode()


# -----------------------------------------------------------------------------

def navigation_link_to_icon(item: Mapping[str, Any]) -> dict[str, Any]:
    return with_class(item, "icon")


# -----------------------------------------------------------------------------

def on_skin_template_navigation(
    sk: Any,
    content_navigation: Mapping[str, Mapping[str, Any]],
    settings: Settings | None = None,
) -> dict[str, dict[str, Any]]:
    """Promote the watch action from "actions" to "views" as a watchstar."""
    settings = settings or get_settings()
    navigation = {group: dict(items or {}) for group, items in content_navigation.items()}

    if getattr(sk, "skin_name", None) != SKIN_NAME or not settings.library_use_icon_watch:
        return navigation

    actions = navigation.get("actions", {})
    key = None
    if "watch" in actions:
        key = "watch"
    if "unwatch" in actions:
        key = "unwatch"

    if key is not None:
        views = navigation.setdefault("views", {})
        views[key] = navigation_link_to_icon(actions[key])
        del actions[key]
    return navigation


# -----------------------------------------------------------------------------

def skin_version_preference(lookup: SkinVersionLookup) -> dict[str, Any]:
    return {
        "type": "toggle",
        # The checkbox title.
        "label-message": "prefs-library-enable-library-1-label",
        # Informational snippet underneath the checkbox.
        "help-message": "prefs-library-enable-library-1-help",
        # Tab and section; "skin-prefs" names the section heading message.
        "section": "rendering/skin/skin-prefs",
        "default": "1" if lookup.is_legacy() else "0",
        # Client-side only: hide unless Library is the chosen skin.
        "hide-if": ["!==", "wpskin", SKIN_NAME],
    }


# -----------------------------------------------------------------------------

def on_get_preferences(
    user: User,
    prefs: Mapping[str, Any],
    request: Request | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Insert the Library toggle directly below the "skin" section, or append it.

    An existing entry at or above "skin" (or anywhere, when there is no
    "skin" section) is kept where it is.  One below "skin" is replaced by
    the toggle in the slot right after "skin".
    """
    settings = settings or get_settings()
    updated = dict(prefs)
    if not settings.library_show_skin_preferences:
        return updated

    lookup = SkinVersionLookup(request or StaticRequest(), user, settings)
    library_prefs = {PREF_KEY_SKIN_VERSION: skin_version_preference(lookup)}

    items = list(updated.items())
    keys = [k for k, _ in items]
    if "skin" in keys:
        index = keys.index("skin") + 1
        head = dict(items[:index])
        if PREF_KEY_SKIN_VERSION in head:
            return updated
        tail = {k: v for k, v in items[index:] if k not in library_prefs}
        return {**head, **library_prefs, **tail}

    for key, value in library_prefs.items():
        updated.setdefault(key, value)
    return updated


# -----------------------------------------------------------------------------

def on_preferences_form_pre_save(
    form_data: Mapping[str, Any],
    user: User,
    old_preferences: Mapping[str, Any],
) -> str | None:
    """Persist the skin version string behind the boolean form field.

    One preference change may cause two writes: the boolean from the form,
    then this version string.
    """
    preference = None
    is_library_enabled = (form_data.get("skin") or "") == SKIN_NAME
    if is_library_enabled and PREF_KEY_SKIN_VERSION in form_data:
        # Submitted checkboxes may arrive as "0"/"1" strings.
        enabled = form_data[PREF_KEY_SKIN_VERSION] not in (None, False, 0, "", "0")
        preference = SKIN_VERSION_LEGACY if enabled else SKIN_VERSION_LATEST
    elif PREF_KEY_SKIN_VERSION in old_preferences:
        # The field was hidden, most likely because another skin was chosen.
        preference = old_preferences[PREF_KEY_SKIN_VERSION]

    if preference is not None:
        user.set_option(PREF_KEY_SKIN_VERSION, preference)
    return preference


# -----------------------------------------------------------------------------

def on_local_user_created(
    user: User,
    is_auto_created: bool = False,
    settings: Settings | None = None,
) -> None:
    settings = settings or get_settings()
    # Runs once per account; later changes go through the preferences form.
    default = settings.library_default_skin_version_for_new_accounts
    log.debug("Setting %s=%s for new account (auto=%s)", PREF_KEY_SKIN_VERSION, default, is_auto_created)
    user.set_option(PREF_KEY_SKIN_VERSION, default)


# -----------------------------------------------------------------------------

def build_registry(settings: Settings | None = None) -> HookRegistry:
    """Handler table with the skin's hooks registered, in a fixed order."""
    settings = settings or get_settings()
    registry = HookRegistry(deprecated=DEPRECATED_HOOKS)
    registry.register(HOOK_BEFORE_PAGE_DISPLAY_MOBILE, on_before_page_display_mobile)
    registry.register(HOOK_SKIN_TEMPLATE_NAVIGATION, partial(on_skin_template_navigation, settings=settings))
    registry.register(HOOK_GET_PREFERENCES, partial(on_get_preferences, settings=settings))
    registry.register(HOOK_PREFERENCES_FORM_PRE_SAVE, on_preferences_form_pre_save)
    registry.register(HOOK_LOCAL_USER_CREATED, partial(on_local_user_created, settings=settings))
    return registry


# -----------------------------------------------------------------------------
