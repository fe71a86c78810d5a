"""Domain entities."""

from .session_entity import (
    AuthenticatedSession,
    IssuedSession,
    SessionEntity,
)
from .translation_entity import (
    TranslationKind,
    TranslationRecord,
)
from .user_entity import (
    LanguagePreferences,
    UserEntity,
)

__all__ = [
    "AuthenticatedSession",
    "IssuedSession",
    "LanguagePreferences",
    "SessionEntity",
    "TranslationKind",
    "TranslationRecord",
    "UserEntity",
]
