"""User preference schemas."""

from pydantic import (
    BaseModel,
    Field,
)

from translation_hub.domain.entities import LanguagePreferences


class PreferencesUpdate(BaseModel):
    """Both languages are required on every update."""

    default_from_lang: str = Field(..., description="Default source language", examples=["auto"])
    default_to_lang: str = Field(..., description="Default target language", examples=["fr"])


class PreferencesResponse(BaseModel):
    default_from_lang: str
    default_to_lang: str

    @classmethod
    def from_preferences(cls, preferences: LanguagePreferences) -> "PreferencesResponse":
        return cls(**preferences.to_dict())
