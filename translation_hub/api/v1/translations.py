"""Translation history endpoints."""

from typing import List

from fastapi import (
    APIRouter,
    status,
)

from translation_hub.api.v1.auth import CurrentSession
from translation_hub.core.dependencies import TranslationServiceDep
from translation_hub.domain.entities import TranslationKind
from translation_hub.schemas.translations import (
    TranslationCreate,
    TranslationResponse,
)

router = APIRouter()


@router.post("/{kind}", response_model=TranslationResponse, status_code=status.HTTP_201_CREATED)
async def save_translation(
    kind: TranslationKind,
    translation: TranslationCreate,
    session: CurrentSession,
    translations: TranslationServiceDep,
):
    """Append a text or voice translation to the caller's history.

    The owner is always the authenticated user.
    """
    record = await translations.save_translation(
        user_id=session.user_id,
        from_lang=translation.from_lang,
        to_lang=translation.to_lang,
        original_text=translation.original_text,
        translated_text=translation.translated_text,
        kind=kind,
    )
    return TranslationResponse.from_record(record)


@router.get("/{kind}", response_model=List[TranslationResponse])
async def get_translation_history(
    kind: TranslationKind,
    session: CurrentSession,
    translations: TranslationServiceDep,
):
    """List the caller's translations of one kind, newest first."""
    records = await translations.get_translation_history(session.user_id, kind)
    return [TranslationResponse.from_record(record) for record in records]
