"""Translation provider endpoints.

Proxies text translation, language detection and speech transcription to
the configured provider. Results can be saved to the caller's history in
the same request.
"""

from typing import List

from fastapi import APIRouter

from translation_hub.api.v1.auth import CurrentSession
from translation_hub.core.dependencies import (
    TranslationProviderDep,
    TranslationServiceDep,
)
from translation_hub.core.logging import logger
from translation_hub.domain.entities import TranslationKind
from translation_hub.domain.exceptions import ValidationError
from translation_hub.schemas.translate import (
    DetectRequest,
    DetectResponse,
    LanguageResponse,
    SpeechTranslateRequest,
    SpeechTranslateResponse,
    TextTranslateRequest,
    TextTranslateResponse,
)
from translation_hub.schemas.translations import TranslationResponse
from translation_hub.utils.validation import validate_language_code

router = APIRouter()


@router.post("/text", response_model=TextTranslateResponse)
async def translate_text(
    payload: TextTranslateRequest,
    session: CurrentSession,
    provider: TranslationProviderDep,
    translations: TranslationServiceDep,
):
    """Translate text and optionally save it as a text translation."""
    to_lang = validate_language_code(payload.to_lang, "to_lang")
    from_lang = validate_language_code(payload.from_lang, "from_lang", allow_auto=True)

    result = await provider.translate_text(payload.text, to_lang, from_lang)
    logger.info("text_translated", user_id=session.user_id, to_lang=to_lang, provider=provider.name)

    response = TextTranslateResponse(
        translated_text=result.translated_text,
        detected_source_language=result.detected_source_language,
    )
    if payload.save:
        record = await translations.save_translation(
            user_id=session.user_id,
            from_lang=from_lang,
            to_lang=to_lang,
            original_text=payload.text,
            translated_text=result.translated_text,
            kind=TranslationKind.TEXT,
        )
        response.translation = TranslationResponse.from_record(record)
    return response


@router.post("/detect", response_model=DetectResponse)
async def detect_language(payload: DetectRequest, session: CurrentSession, provider: TranslationProviderDep):
    """Detect the language of a text."""
    return DetectResponse(language=await provider.detect_language(payload.text))


@router.post("/speech", response_model=SpeechTranslateResponse)
async def translate_speech(
    payload: SpeechTranslateRequest,
    session: CurrentSession,
    provider: TranslationProviderDep,
    translations: TranslationServiceDep,
):
    """Transcribe a recording, then optionally translate and save it."""
    language = validate_language_code(payload.language, "language")
    to_lang = validate_language_code(payload.to_lang, "to_lang") if payload.to_lang else None
    if payload.save and to_lang is None:
        raise ValidationError("to_lang is required to save a voice translation", "to_lang")

    transcript = await provider.transcribe_audio(payload.audio_bytes(), language)
    logger.info("speech_transcribed", user_id=session.user_id, language=language, provider=provider.name)

    response = SpeechTranslateResponse(transcript=transcript)
    if to_lang is None:
        return response

    result = await provider.translate_text(transcript, to_lang, language.split("-")[0])
    response.translated_text = result.translated_text

    if payload.save:
        record = await translations.save_translation(
            user_id=session.user_id,
            from_lang=language,
            to_lang=to_lang,
            original_text=transcript,
            translated_text=result.translated_text,
            kind=TranslationKind.VOICE,
        )
        response.translation = TranslationResponse.from_record(record)
    return response


@router.get("/languages", response_model=List[LanguageResponse])
async def list_languages(provider: TranslationProviderDep, q: str = ""):
    """List supported languages, filtered by a case-insensitive name match."""
    languages = await provider.list_languages(q.strip())
    return [LanguageResponse(**language) for language in languages]
