from library_skin.schemas.schemas import (
    HostUser, UserCreate, UserOptionsResponse,
    HostState, NavItem,
    PreferencesFormRequest, PreferencesSaveRequest, PreferencesSaveResponse,
    SKIN_VERSIONS,
)

__all__ = [
    "HostUser", "UserCreate", "UserOptionsResponse",
    "HostState", "NavItem",
    "PreferencesFormRequest", "PreferencesSaveRequest", "PreferencesSaveResponse",
    "SKIN_VERSIONS",
]
