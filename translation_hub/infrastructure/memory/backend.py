"""In-memory storage backend for Translation Hub.

Keeps users, sessions and translations in process dictionaries. State is
lost on restart. Used in development and tests when ``USE_MOCK_DB`` is set;
behaves like the relational backend for every operation.
"""

from dataclasses import replace
from typing import (
    Dict,
    List,
    Optional,
)

from translation_hub.core.logging import logger
from translation_hub.domain.entities import (
    LanguagePreferences,
    SessionEntity,
    TranslationKind,
    TranslationRecord,
    UserEntity,
)
from translation_hub.domain.exceptions import UserAlreadyExistsError
from translation_hub.domain.repositories import StorageBackendInterface


class MemoryStorageBackend(StorageBackendInterface):
    """Dictionary-backed implementation of the storage backend."""

    name = "memory"

    def __init__(self):
        self._users_by_id: Dict[str, UserEntity] = {}
        self._user_ids_by_email: Dict[str, str] = {}
        self._sessions: Dict[str, SessionEntity] = {}
        self._translations: List[TranslationRecord] = []
        logger.info("memory_storage_backend_initialized")

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self._users_by_id.clear()
        self._user_ids_by_email.clear()
        self._sessions.clear()
        self._translations.clear()

    async def create_user(self, user: UserEntity) -> UserEntity:
        if user.email in self._user_ids_by_email:
            raise UserAlreadyExistsError(user.email)

        stored = replace(user)
        self._users_by_id[stored.id] = stored
        self._user_ids_by_email[stored.email] = stored.id
        return replace(stored)

    async def get_user_by_email(self, email: str) -> Optional[UserEntity]:
        user_id = self._user_ids_by_email.get(email)
        if user_id is None:
            return None
        return replace(self._users_by_id[user_id])

    async def get_user_by_id(self, user_id: str) -> Optional[UserEntity]:
        user = self._users_by_id.get(user_id)
        return replace(user) if user else None

    async def create_session(self, session: SessionEntity) -> SessionEntity:
        # Drop sessions already expired at the new session's issue time.
        expired = [key for key, stored in self._sessions.items() if stored.is_expired(session.created_at)]
        for key in expired:
            del self._sessions[key]

        self._sessions[session.signed_session_id] = replace(session)
        return session

    async def get_session_by_signed_id(self, signed_session_id: str) -> Optional[SessionEntity]:
        session = self._sessions.get(signed_session_id)
        return replace(session) if session else None

    async def delete_session(self, signed_session_id: str) -> bool:
        return self._sessions.pop(signed_session_id, None) is not None

    async def save_translation(self, record: TranslationRecord) -> TranslationRecord:
        self._translations.append(record)
        return record

    async def list_translations(self, user_id: str, kind: TranslationKind) -> List[TranslationRecord]:
        # Reverse insertion order breaks ties between equal timestamps.
        matching = [
            record
            for record in reversed(self._translations)
            if record.user_id == user_id and record.kind == kind
        ]
        return sorted(matching, key=lambda record: record.created_at, reverse=True)

    async def get_preferences(self, user_id: str) -> Optional[LanguagePreferences]:
        user = self._users_by_id.get(user_id)
        return user.preferences if user else None

    async def update_preferences(self, user_id: str, from_lang: str, to_lang: str) -> bool:
        user = self._users_by_id.get(user_id)
        if user is None:
            return False

        user.default_from_lang = from_lang
        user.default_to_lang = to_lang
        return True
