#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Names shared by the hooks, the version lookup and the template builder.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations


SKIN_NAME = "library"

# User option holding the skin version string.
PREF_KEY_SKIN_VERSION = "LibrarySkinVersion"

# Query string override, e.g. ?useskinversion=1
QUERY_PARAM_SKIN_VERSION = "useskinversion"

SKIN_VERSION_LEGACY = "1"
SKIN_VERSION_LATEST = "2"

# Template roots, without folder or extension.
TEMPLATE_ROOT_LATEST = "skin"
TEMPLATE_ROOT_LEGACY = "skin-legacy"

RESPONSIVE_BODY_CLASS = "skin-library-responsive"

# Provenance code appended to the opt-out link: "vct" = the modern skin,
# "w" = web, "1" = first version of the link.
OPT_OUT_LINK_TRACKING_CODE = "vctw1"
OPT_OUT_LINK_FRAGMENT = "mw-prefsection-rendering-skin-skin-prefs"


# -----------------------------------------------------------------------------
# Host hook names
# -----------------------------------------------------------------------------

HOOK_BEFORE_PAGE_DISPLAY_MOBILE = "BeforePageDisplayMobile"
HOOK_SKIN_TEMPLATE_NAVIGATION = "SkinTemplateNavigation"
HOOK_GET_PREFERENCES = "GetPreferences"
HOOK_PREFERENCES_FORM_PRE_SAVE = "PreferencesFormPreSave"
HOOK_LOCAL_USER_CREATED = "LocalUserCreated"

# Extension points that only survive for older extensions.
HOOK_SKIN_TEMPLATE_TOOLBOX_END = "SkinTemplateToolboxEnd"
HOOK_LIBRARY_AFTER_TOOLBOX = "LibraryAfterToolbox"
HOOK_LIBRARY_BEFORE_FOOTER = "LibraryBeforeFooter"

DEPRECATED_HOOKS = {
    HOOK_SKIN_TEMPLATE_TOOLBOX_END: "1.35",
    HOOK_LIBRARY_AFTER_TOOLBOX: "1.35",
    HOOK_LIBRARY_BEFORE_FOOTER: "1.35",
}


# -----------------------------------------------------------------------------
