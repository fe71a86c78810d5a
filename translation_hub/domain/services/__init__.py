"""Domain services."""

from .auth_service import (
    AuthService,
    LoginResult,
)
from .credential_service import CredentialService
from .session_service import SessionService
from .translation_service import TranslationHistoryService
from .user_service import UserDomainService

__all__ = [
    "AuthService",
    "CredentialService",
    "LoginResult",
    "SessionService",
    "TranslationHistoryService",
    "UserDomainService",
]
