#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Preference endpoints
====================
POST /api/v1/preferences/form  — preference sections with the skin toggle added
POST /api/v1/preferences/save  — translate a submitted form into the stored version
POST /api/v1/users             — options for a newly created account
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from library_skin.core.constants import (
    HOOK_GET_PREFERENCES, HOOK_LOCAL_USER_CREATED, HOOK_PREFERENCES_FORM_PRE_SAVE,
)
from library_skin.core.hook_registry import HookRegistry
from library_skin.routes.deps import get_hooks
from library_skin.schemas import (
    PreferencesFormRequest, PreferencesSaveRequest, PreferencesSaveResponse,
    UserCreate, UserOptionsResponse,
)
from library_skin.services.host import StaticRequest, StaticUser


# -----------------------------------------------------------------------------

router = APIRouter(tags=["preferences"])


# -----------------------------------------------------------------------------

@router.post("/preferences/form")
async def preferences_form(
    data: PreferencesFormRequest,
    hooks: HookRegistry = Depends(get_hooks),
):
    user = StaticUser.from_schema(data.user)
    sections = hooks.apply(
        HOOK_GET_PREFERENCES, dict(data.sections), user,
        request=StaticRequest(data.request_params),
    )
    # Returned as a list as well, so clients that do not keep JSON key order
    # still see the section order.
    return {"sections": sections, "order": list(sections)}


# -----------------------------------------------------------------------------

@router.post("/preferences/save", response_model=PreferencesSaveResponse)
async def preferences_save(
    data: PreferencesSaveRequest,
    hooks: HookRegistry = Depends(get_hooks),
):
    user = StaticUser.from_schema(data.user)
    results = hooks.run(HOOK_PREFERENCES_FORM_PRE_SAVE, data.form_data, user, data.old_preferences)
    preference = next((r for r in reversed(results) if r is not None), None)
    return PreferencesSaveResponse(preference=preference, options=user.options)


# -----------------------------------------------------------------------------

@router.post("/users", response_model=UserOptionsResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    hooks: HookRegistry = Depends(get_hooks),
):
    user = StaticUser(name=data.name, logged_in=True)
    hooks.run(HOOK_LOCAL_USER_CREATED, user, data.is_auto_created)
    return UserOptionsResponse(name=user.name, options=user.options)


# -----------------------------------------------------------------------------
