"""Dependency wiring for Translation Hub.

Builds the storage backend, the translation provider and the domain
services from settings. Called once from the application lifespan; the
resulting container lives on ``app.state`` and is never swapped.
"""

from dataclasses import dataclass

from translation_hub.core.config import Settings
from translation_hub.core.logging import logger
from translation_hub.domain.repositories import StorageBackendInterface
from translation_hub.domain.services import (
    AuthService,
    CredentialService,
    SessionService,
    TranslationHistoryService,
    UserDomainService,
)
from translation_hub.infrastructure.database import (
    ConnectionManager,
    SQLStorageBackend,
)
from translation_hub.infrastructure.memory import MemoryStorageBackend
from translation_hub.services.translation_provider import (
    GoogleTranslationProvider,
    MockTranslationProvider,
    TranslationProviderInterface,
)


def build_storage_backend(settings: Settings) -> StorageBackendInterface:
    """Select the storage backend from ``USE_MOCK_DB``.

    Args:
        settings: Application settings

    Returns:
        StorageBackendInterface: In-memory or relational backend
    """
    if settings.USE_MOCK_DB:
        logger.warning("using_mock_storage_backend", environment=settings.APP_ENV.value)
        return MemoryStorageBackend()

    manager = ConnectionManager(
        settings.SQLALCHEMY_DATABASE_URL,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        connect_timeout=settings.DATABASE_CONNECT_TIMEOUT,
        echo=settings.DATABASE_ECHO,
        create_schema=settings.DATABASE_CREATE_SCHEMA,
    )
    logger.info("using_sql_storage_backend", backend=manager.url.get_backend_name())
    return SQLStorageBackend(manager)


def build_translation_provider(settings: Settings) -> TranslationProviderInterface:
    """Select the translation provider from ``USE_MOCK_TRANSLATION_API``."""
    if settings.USE_MOCK_TRANSLATION_API:
        logger.warning("using_mock_translation_provider")
        return MockTranslationProvider()

    if not settings.GOOGLE_TRANSLATE_API_KEY:
        logger.warning("google_translate_api_key_missing")

    return GoogleTranslationProvider(
        translate_api_key=settings.GOOGLE_TRANSLATE_API_KEY,
        speech_api_key=settings.GOOGLE_SPEECH_API_KEY or settings.GOOGLE_TRANSLATE_API_KEY,
        timeout=settings.TRANSLATION_API_TIMEOUT,
    )


@dataclass
class Container:
    """Application-scoped services."""

    backend: StorageBackendInterface
    provider: TranslationProviderInterface
    credentials: CredentialService
    sessions: SessionService
    users: UserDomainService
    auth: AuthService
    translations: TranslationHistoryService

    async def close(self) -> None:
        await self.provider.close()
        await self.backend.close()


def build_container(
    settings: Settings,
    backend: StorageBackendInterface = None,
    provider: TranslationProviderInterface = None,
) -> Container:
    """Wire every service from settings.

    Args:
        settings: Application settings, already security-validated
        backend: Storage backend override, built from settings if omitted
        provider: Translation provider override, built from settings if omitted

    Returns:
        Container: The wired services
    """
    if backend is None:
        backend = build_storage_backend(settings)
    if provider is None:
        provider = build_translation_provider(settings)

    credentials = CredentialService(rounds=settings.BCRYPT_ROUNDS)
    sessions = SessionService(
        backend,
        secret=settings.SESSION_SECRET,
        ttl_seconds=settings.SESSION_EXPIRATION,
    )
    users = UserDomainService(backend, credentials)

    return Container(
        backend=backend,
        provider=provider,
        credentials=credentials,
        sessions=sessions,
        users=users,
        auth=AuthService(users, sessions),
        translations=TranslationHistoryService(backend),
    )
