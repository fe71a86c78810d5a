"""User preference endpoints."""

from fastapi import APIRouter

from translation_hub.api.v1.auth import CurrentSession
from translation_hub.core.dependencies import UserServiceDep
from translation_hub.schemas.users import (
    PreferencesResponse,
    PreferencesUpdate,
)

router = APIRouter()


@router.get("/preferences", response_model=PreferencesResponse)
async def get_preferences(session: CurrentSession, users: UserServiceDep):
    """Get the caller's default languages."""
    preferences = await users.get_language_preferences(session.user_id)
    return PreferencesResponse.from_preferences(preferences)


@router.put("/preferences", response_model=PreferencesResponse)
async def update_preferences(update: PreferencesUpdate, session: CurrentSession, users: UserServiceDep):
    """Replace the caller's default languages.

    Raises:
        UserNotFoundError: If the session's user no longer exists
    """
    preferences = await users.update_language_preferences(
        session.user_id, update.default_from_lang, update.default_to_lang
    )
    return PreferencesResponse.from_preferences(preferences)
