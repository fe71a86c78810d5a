"""External service clients."""

from .translation_provider import (
    GoogleTranslationProvider,
    MockTranslationProvider,
    TranslationProviderInterface,
    TranslationResult,
)

__all__ = [
    "GoogleTranslationProvider",
    "MockTranslationProvider",
    "TranslationProviderInterface",
    "TranslationResult",
]
