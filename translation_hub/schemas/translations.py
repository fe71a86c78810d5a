"""Schemas for saved translation history."""

from datetime import datetime

from pydantic import (
    BaseModel,
    Field,
)

from translation_hub.constants.validation import MAX_TEXT_LENGTH
from translation_hub.domain.entities import (
    TranslationKind,
    TranslationRecord,
)


class TranslationCreate(BaseModel):
    """A translation to append to the caller's history."""

    from_lang: str = Field(..., description="Source language code, or 'auto'", examples=["auto"])
    to_lang: str = Field(..., description="Target language code", examples=["es"])
    original_text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)
    translated_text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)


class TranslationResponse(BaseModel):
    """A stored translation record."""

    id: str
    kind: TranslationKind
    from_lang: str
    to_lang: str
    original_text: str
    translated_text: str
    created_at: datetime

    @classmethod
    def from_record(cls, record: TranslationRecord) -> "TranslationResponse":
        return cls(
            id=record.id,
            kind=record.kind,
            from_lang=record.from_lang,
            to_lang=record.to_lang,
            original_text=record.original_text,
            translated_text=record.translated_text,
            created_at=record.created_at,
        )
