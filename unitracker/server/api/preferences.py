"""
Preferences Endpoints.

Timer lengths, the daily goal and UI toggles. One row per user, written by
upsert.
"""

from typing import Optional

from fastapi import APIRouter

from unitracker.core.models.io import PreferencesRead, PreferencesUpsert
from unitracker.server.services.deps import CurrentUserDep, ReposDep

router = APIRouter(tags=["preferences"])


@router.get(
    "",
    response_model=Optional[PreferencesRead],
    summary="Get Preferences",
    description="The acting user's preferences, or `null` if none have been saved.",
)
async def get_preferences(user: CurrentUserDep, repos: ReposDep) -> Optional[PreferencesRead]:
    preferences = await repos.preferences.get_by_user(user.id)
    if preferences is None:
        return None
    return PreferencesRead.model_validate(preferences)


@router.put(
    "",
    response_model=PreferencesRead,
    summary="Save Preferences",
    description="Create or update preferences. Fields not sent keep their stored value or default.",
)
@router.patch(
    "",
    response_model=PreferencesRead,
    summary="Save Preferences",
    description="Create or update preferences. Fields not sent keep their stored value or default.",
)
@router.post(
    "",
    response_model=PreferencesRead,
    summary="Save Preferences",
    description="Create or update preferences. Fields not sent keep their stored value or default.",
)
async def save_preferences(
    preferences_in: PreferencesUpsert, user: CurrentUserDep, repos: ReposDep
) -> PreferencesRead:
    preferences = await repos.preferences.upsert(user.id, preferences_in.changes())
    return PreferencesRead.model_validate(preferences)
