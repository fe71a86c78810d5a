"""Schemas for the translation provider proxy endpoints."""

import base64
import binascii
from typing import Optional

from pydantic import (
    BaseModel,
    Field,
    field_validator,
)

from translation_hub.constants.validation import (
    MAX_AUDIO_BYTES,
    MAX_TEXT_LENGTH,
)
from translation_hub.schemas.translations import TranslationResponse


class TextTranslateRequest(BaseModel):
    """Text to translate, optionally saved to the caller's history."""

    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)
    to_lang: str = Field(..., description="Target language code", examples=["es"])
    from_lang: str = Field("auto", description="Source language code, or 'auto' to detect")
    save: bool = Field(False, description="Append the result to the text history")


class TextTranslateResponse(BaseModel):
    translated_text: str
    detected_source_language: Optional[str] = None
    translation: Optional[TranslationResponse] = None


class DetectRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)


class DetectResponse(BaseModel):
    language: str


class LanguageResponse(BaseModel):
    code: str
    name: str


class SpeechTranslateRequest(BaseModel):
    """A base64 WEBM/Opus recording to transcribe and optionally translate."""

    audio_content: str = Field(..., description="Base64-encoded WEBM/Opus audio")
    language: str = Field("en-US", description="Spoken language, e.g. 'he-IL'")
    to_lang: Optional[str] = Field(None, description="Translate the transcript into this language")
    save: bool = Field(False, description="Append the result to the voice history; requires to_lang")

    @field_validator("audio_content")
    @classmethod
    def _check_audio(cls, value: str) -> str:
        try:
            audio = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError("audio_content must be valid base64") from e
        if not audio:
            raise ValueError("audio_content is empty")
        if len(audio) > MAX_AUDIO_BYTES:
            raise ValueError(f"audio_content exceeds {MAX_AUDIO_BYTES} bytes")
        return value

    def audio_bytes(self) -> bytes:
        return base64.b64decode(self.audio_content)


class SpeechTranslateResponse(BaseModel):
    transcript: str
    translated_text: Optional[str] = None
    translation: Optional[TranslationResponse] = None
