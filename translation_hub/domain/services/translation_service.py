"""Translation history domain service."""

from typing import List

from translation_hub.core.logging import logger
from translation_hub.domain.entities import (
    TranslationKind,
    TranslationRecord,
)
from translation_hub.domain.exceptions import ValidationError
from translation_hub.domain.repositories import StorageBackendInterface
from translation_hub.utils.validation import (
    sanitize_string,
    validate_language_code,
)


class TranslationHistoryService:
    """Saves and lists a user's translations."""

    def __init__(self, backend: StorageBackendInterface):
        """Initialize the translation history service.

        Args:
            backend: Storage backend for translation records
        """
        self.backend = backend

    async def save_translation(
        self,
        user_id: str,
        from_lang: str,
        to_lang: str,
        original_text: str,
        translated_text: str,
        kind: TranslationKind,
    ) -> TranslationRecord:
        """Validate and append a translation record.

        Args:
            user_id: Owner, taken from the authenticated session
            from_lang: Source language code, or "auto"
            to_lang: Target language code
            original_text: Text as entered or transcribed
            translated_text: Provider output
            kind: Text or voice

        Returns:
            TranslationRecord: The stored record

        Raises:
            ValidationError: If a field is missing or malformed
            BackendUnavailableError: If the record could not be stored
        """
        record = TranslationRecord(
            user_id=user_id,
            from_lang=validate_language_code(from_lang, "from_lang", allow_auto=True),
            to_lang=validate_language_code(to_lang, "to_lang"),
            original_text=sanitize_string(original_text, field="original_text"),
            translated_text=sanitize_string(translated_text, field="translated_text"),
            kind=TranslationKind(kind),
        )
        if not record.original_text or not record.translated_text:
            raise ValidationError("original_text and translated_text are required", "original_text")

        saved = await self.backend.save_translation(record)
        logger.info("translation_saved", user_id=user_id, kind=saved.kind.value, translation_id=saved.id)
        return saved

    async def get_translation_history(self, user_id: str, kind: TranslationKind) -> List[TranslationRecord]:
        """List a user's translations of one kind, newest first."""
        return await self.backend.list_translations(user_id, TranslationKind(kind))
