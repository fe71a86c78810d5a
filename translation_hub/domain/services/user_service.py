"""User domain service for Translation Hub.

This module contains business logic for user registration, credential
checks and language preferences.
"""

from typing import Optional

from translation_hub.core.logging import logger
from translation_hub.domain.entities import (
    LanguagePreferences,
    UserEntity,
)
from translation_hub.domain.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from translation_hub.domain.repositories import StorageBackendInterface
from translation_hub.domain.services.credential_service import CredentialService
from translation_hub.utils.validation import (
    validate_email,
    validate_language_code,
    validate_password_strength,
)


class UserDomainService:
    """Domain service for user-related business logic."""

    def __init__(self, backend: StorageBackendInterface, credentials: CredentialService):
        """Initialize the user domain service.

        Args:
            backend: Storage backend for user data
            credentials: Password hashing service
        """
        self.backend = backend
        self.credentials = credentials

    async def register_user(self, email: str, password: str) -> UserEntity:
        """Register a new user.

        Input is validated before any backend call.

        Args:
            email: Login email
            password: Plaintext password

        Returns:
            UserEntity: The created user with empty language preferences

        Raises:
            InvalidEmailError: If the email is malformed
            WeakPasswordError: If the password fails the policy
            UserAlreadyExistsError: If the email is already registered
        """
        email = validate_email(email)
        validate_password_strength(password)

        if await self.backend.get_user_by_email(email) is not None:
            logger.warning("user_registration_duplicate_email")
            raise UserAlreadyExistsError(email)

        password_hash = await self.credentials.hash_password(password)
        user = await self.backend.create_user(UserEntity(email=email, password_hash=password_hash))

        logger.info("user_registered", user_id=user.id)
        return user

    async def find_user_by_email(self, email: str) -> Optional[UserEntity]:
        """Find a user by exact email.

        Returns:
            UserEntity or None if not found
        """
        return await self.backend.get_user_by_email(email.strip())

    async def authenticate(self, email: str, password: str) -> UserEntity:
        """Check login credentials.

        Args:
            email: Login email
            password: Plaintext password

        Returns:
            UserEntity: The authenticated user

        Raises:
            InvalidCredentialsError: For an unknown email or a wrong password alike
        """
        if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
            raise InvalidCredentialsError()

        user = await self.find_user_by_email(email)
        if user is None:
            await self.credentials.verify_against_dummy(password)
            logger.warning("login_failed")
            raise InvalidCredentialsError()

        if not await self.credentials.verify_password(password, user.password_hash):
            logger.warning("login_failed", user_id=user.id)
            raise InvalidCredentialsError()

        return user

    async def get_language_preferences(self, user_id: str) -> LanguagePreferences:
        """Get a user's language preferences.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        preferences = await self.backend.get_preferences(user_id)
        if preferences is None:
            raise UserNotFoundError(user_id=user_id)
        return preferences

    async def update_language_preferences(
        self, user_id: str, from_lang: str, to_lang: str
    ) -> LanguagePreferences:
        """Update a user's language preferences.

        Writing the values the user already has is a successful no-op.

        Args:
            user_id: User ID
            from_lang: Default source language
            to_lang: Default target language

        Returns:
            LanguagePreferences: The preferences after the update

        Raises:
            ValidationError: If a language code is malformed
            UserNotFoundError: If the user does not exist
        """
        from_lang = validate_language_code(from_lang, "default_from_lang", allow_auto=True)
        to_lang = validate_language_code(to_lang, "default_to_lang")

        if not await self.backend.update_preferences(user_id, from_lang, to_lang):
            raise UserNotFoundError(user_id=user_id)

        logger.info("user_preferences_updated", user_id=user_id, from_lang=from_lang, to_lang=to_lang)
        return LanguagePreferences(default_from_lang=from_lang, default_to_lang=to_lang)
