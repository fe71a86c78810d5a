"""Storage backend interface for Translation Hub.

This module defines the single contract every persistence body implements.
The in-memory mock and the relational backend must be interchangeable:
same return types, same exceptions, for every operation.
"""

from abc import (
    ABC,
    abstractmethod,
)
from typing import (
    List,
    Optional,
)

from translation_hub.domain.entities import (
    LanguagePreferences,
    SessionEntity,
    TranslationKind,
    TranslationRecord,
    UserEntity,
)


class StorageBackendInterface(ABC):
    """Abstract storage backend.

    Implementations raise ``BackendUnavailableError`` when the underlying
    store cannot be reached, and never return partially applied state.
    """

    name: str = "abstract"

    @abstractmethod
    async def health_check(self) -> bool:
        """Check backend connectivity.

        Returns:
            bool: True if the backend can serve requests
        """

    @abstractmethod
    async def close(self) -> None:
        """Release any resources held by the backend."""

    # Users
    @abstractmethod
    async def create_user(self, user: UserEntity) -> UserEntity:
        """Persist a new user.

        Args:
            user: User entity to create

        Returns:
            UserEntity: The stored user

        Raises:
            UserAlreadyExistsError: If a user with the same email exists
            BackendUnavailableError: If the store cannot be reached
        """

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[UserEntity]:
        """Get user by email address.

        Args:
            email: Email address to lookup, compared exactly

        Returns:
            UserEntity or None if not found
        """

    @abstractmethod
    async def get_user_by_id(self, user_id: str) -> Optional[UserEntity]:
        """Get user by ID.

        Args:
            user_id: User ID to lookup

        Returns:
            UserEntity or None if not found
        """

    # Sessions
    @abstractmethod
    async def create_session(self, session: SessionEntity) -> SessionEntity:
        """Durably record a session before it is handed out.

        Args:
            session: Session entity to store

        Returns:
            SessionEntity: The stored session
        """

    @abstractmethod
    async def get_session_by_signed_id(self, signed_session_id: str) -> Optional[SessionEntity]:
        """Look up a session by its signed identifier.

        Expired records are returned as-is; expiry is the caller's check.

        Args:
            signed_session_id: Signed session identifier

        Returns:
            SessionEntity or None if no record matches
        """

    @abstractmethod
    async def delete_session(self, signed_session_id: str) -> bool:
        """Delete a session record.

        Args:
            signed_session_id: Signed session identifier

        Returns:
            bool: True if a record was removed, False if none matched
        """

    # Translations
    @abstractmethod
    async def save_translation(self, record: TranslationRecord) -> TranslationRecord:
        """Append a translation record.

        Args:
            record: Translation record to store

        Returns:
            TranslationRecord: The stored record
        """

    @abstractmethod
    async def list_translations(self, user_id: str, kind: TranslationKind) -> List[TranslationRecord]:
        """List a user's translations of one kind, newest first.

        Args:
            user_id: Owning user
            kind: Text or voice

        Returns:
            List[TranslationRecord]: Records ordered by created_at descending;
                among equal timestamps the most recently saved comes first
        """

    # Preferences
    @abstractmethod
    async def get_preferences(self, user_id: str) -> Optional[LanguagePreferences]:
        """Get a user's language preferences.

        Args:
            user_id: User ID

        Returns:
            LanguagePreferences or None if the user does not exist
        """

    @abstractmethod
    async def update_preferences(self, user_id: str, from_lang: str, to_lang: str) -> bool:
        """Set a user's language preferences.

        Args:
            user_id: User ID
            from_lang: Default source language
            to_lang: Default target language

        Returns:
            bool: True if the user exists (whether or not the values changed),
                False if no such user
        """
