"""Translation and speech-to-text provider clients.

Two interchangeable implementations are provided:

- ``GoogleTranslationProvider`` calls Google Cloud Translation v2 and
  Speech-to-Text v1 over REST with ``httpx``.
- ``MockTranslationProvider`` returns deterministic results and makes no
  network calls; it is used for development and tests.

The implementation is chosen once at startup from
``USE_MOCK_TRANSLATION_API``.
"""

import base64
from abc import (
    ABC,
    abstractmethod,
)
from dataclasses import dataclass
from typing import (
    Any,
    Dict,
    List,
    Optional,
)

import httpx

from translation_hub.core.logging import logger
from translation_hub.domain.exceptions import TranslationProviderError

GOOGLE_TRANSLATE_API_URL = "https://translation.googleapis.com/language/translate/v2"
GOOGLE_SPEECH_API_URL = "https://speech.googleapis.com/v1/speech:recognize"
SPEECH_AUDIO_ENCODING = "WEBM_OPUS"
AUTO_SOURCE_LANGUAGE = "auto"

MOCK_LANGUAGES = [
    {"code": "en", "name": "English"},
    {"code": "es", "name": "Spanish"},
    {"code": "fr", "name": "French"},
    {"code": "de", "name": "German"},
]
MOCK_DETECTED_LANGUAGE = "en"
MOCK_TRANSCRIPT = "This is a sample transcription of your voice recording."


@dataclass(frozen=True)
class TranslationResult:
    """Provider output for one translation."""

    translated_text: str
    detected_source_language: Optional[str] = None


def filter_languages(languages: List[Dict[str, str]], query: str = "") -> List[Dict[str, str]]:
    """Keep languages whose name contains ``query``, case-insensitively."""
    if not query:
        return list(languages)
    needle = query.lower()
    return [language for language in languages if needle in language["name"].lower()]


class TranslationProviderInterface(ABC):
    """Contract for translation and transcription providers."""

    name: str = "abstract"

    @abstractmethod
    async def translate_text(
        self, text: str, target_lang: str, source_lang: str = AUTO_SOURCE_LANGUAGE
    ) -> TranslationResult:
        """Translate text into ``target_lang``."""

    @abstractmethod
    async def detect_language(self, text: str) -> str:
        """Return the language code detected for ``text``."""

    @abstractmethod
    async def list_languages(self, query: str = "") -> List[Dict[str, str]]:
        """List supported languages as ``{code, name}``, filtered by name."""

    @abstractmethod
    async def transcribe_audio(self, audio: bytes, language: str = "en-US") -> str:
        """Transcribe a WEBM/Opus recording."""

    async def close(self) -> None:
        """Release any held resources."""


class MockTranslationProvider(TranslationProviderInterface):
    """Deterministic provider for development without API keys."""

    name = "mock"

    async def translate_text(
        self, text: str, target_lang: str, source_lang: str = AUTO_SOURCE_LANGUAGE
    ) -> TranslationResult:
        logger.warning("mock_translation_used", target_lang=target_lang)
        detected = MOCK_DETECTED_LANGUAGE if source_lang == AUTO_SOURCE_LANGUAGE else None
        return TranslationResult(
            translated_text=f"[Mock Translation] {text} (to {target_lang})",
            detected_source_language=detected,
        )

    async def detect_language(self, text: str) -> str:
        logger.warning("mock_language_detection_used")
        return MOCK_DETECTED_LANGUAGE

    async def list_languages(self, query: str = "") -> List[Dict[str, str]]:
        return filter_languages(MOCK_LANGUAGES, query)

    async def transcribe_audio(self, audio: bytes, language: str = "en-US") -> str:
        logger.warning("mock_speech_recognition_used", language=language)
        return MOCK_TRANSCRIPT


class GoogleTranslationProvider(TranslationProviderInterface):
    """Google Cloud Translation v2 and Speech-to-Text v1 REST client."""

    name = "google"

    def __init__(
        self,
        translate_api_key: str,
        speech_api_key: str,
        timeout: float = 15.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the provider.

        Args:
            translate_api_key: API key for the Translation API
            speech_api_key: API key for the Speech-to-Text API
            timeout: Seconds allowed per request
            client: Pre-built HTTP client, mainly for tests
        """
        self.translate_api_key = translate_api_key
        self.speech_api_key = speech_api_key
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        await self.client.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        """Send one request and return the decoded JSON body.

        Raises:
            TranslationProviderError: On transport errors, non-2xx
                responses or a non-JSON body
        """
        try:
            response = await self.client.request(method, url, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            message = _google_error_message(e.response)
            logger.error(
                "translation_provider_http_error",
                url=url,
                status_code=e.response.status_code,
                error=message,
            )
            raise TranslationProviderError(message, e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error("translation_provider_unreachable", url=url, error=str(e) or type(e).__name__)
            raise TranslationProviderError("Translation provider unreachable") from e
        except ValueError as e:
            logger.error("translation_provider_invalid_json", url=url)
            raise TranslationProviderError("Invalid response from translation provider") from e

    async def translate_text(
        self, text: str, target_lang: str, source_lang: str = AUTO_SOURCE_LANGUAGE
    ) -> TranslationResult:
        params = {"q": text, "target": target_lang, "format": "text", "key": self.translate_api_key}
        if source_lang and source_lang != AUTO_SOURCE_LANGUAGE:
            params["source"] = source_lang

        body = await self._request("POST", GOOGLE_TRANSLATE_API_URL, params=params)
        try:
            translation = body["data"]["translations"][0]
            return TranslationResult(
                translated_text=translation["translatedText"],
                detected_source_language=translation.get("detectedSourceLanguage"),
            )
        except (KeyError, IndexError, TypeError) as e:
            raise TranslationProviderError("Invalid response structure from translation API") from e

    async def detect_language(self, text: str) -> str:
        body = await self._request(
            "POST",
            f"{GOOGLE_TRANSLATE_API_URL}/detect",
            params={"q": text, "key": self.translate_api_key},
        )
        try:
            return body["data"]["detections"][0][0]["language"]
        except (KeyError, IndexError, TypeError) as e:
            raise TranslationProviderError("Invalid response structure from detection API") from e

    async def list_languages(self, query: str = "") -> List[Dict[str, str]]:
        body = await self._request(
            "GET",
            f"{GOOGLE_TRANSLATE_API_URL}/languages",
            params={"target": "en", "key": self.translate_api_key},
        )
        try:
            languages = [
                {"code": language["language"], "name": language["name"]}
                for language in body["data"]["languages"]
            ]
        except (KeyError, TypeError) as e:
            raise TranslationProviderError("Invalid response structure from languages API") from e
        return filter_languages(languages, query)

    async def transcribe_audio(self, audio: bytes, language: str = "en-US") -> str:
        payload = {
            "config": {
                "encoding": SPEECH_AUDIO_ENCODING,
                "languageCode": language.split("-")[0],
            },
            "audio": {"content": base64.b64encode(audio).decode("ascii")},
        }
        body = await self._request(
            "POST",
            GOOGLE_SPEECH_API_URL,
            params={"key": self.speech_api_key},
            json=payload,
        )
        try:
            return body["results"][0]["alternatives"][0]["transcript"]
        except (KeyError, IndexError, TypeError) as e:
            raise TranslationProviderError("Invalid response structure from speech API") from e


def _google_error_message(response: httpx.Response) -> str:
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return f"Translation provider returned HTTP {response.status_code}"
