"""Tests for the translation and speech providers.

The Google provider is exercised against ``httpx.MockTransport`` so no
request ever leaves the process.
"""

import base64
import json

import httpx
import pytest

from translation_hub.domain.exceptions import TranslationProviderError
from translation_hub.services.translation_provider import (
    GOOGLE_SPEECH_API_URL,
    GOOGLE_TRANSLATE_API_URL,
    MOCK_TRANSCRIPT,
    GoogleTranslationProvider,
    MockTranslationProvider,
    filter_languages,
)


def _provider(handler) -> GoogleTranslationProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GoogleTranslationProvider("translate-key", "speech-key", client=client)


class TestGoogleTranslationProvider:
    async def test_translate_text(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={"data": {"translations": [{"translatedText": "Hola", "detectedSourceLanguage": "en"}]}},
            )

        provider = _provider(handler)
        result = await provider.translate_text("Hello", "es")
        await provider.close()

        assert result.translated_text == "Hola"
        assert result.detected_source_language == "en"
        params = seen[0].url.params
        assert str(seen[0].url).startswith(GOOGLE_TRANSLATE_API_URL)
        assert params["q"] == "Hello"
        assert params["target"] == "es"
        assert params["key"] == "translate-key"
        assert "source" not in params

    async def test_explicit_source_language_is_sent(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"data": {"translations": [{"translatedText": "Bonjour"}]}})

        provider = _provider(handler)
        result = await provider.translate_text("Hello", "fr", source_lang="en")

        assert seen[0].url.params["source"] == "en"
        assert result.detected_source_language is None

    async def test_detect_language(self):
        def handler(request):
            assert request.url.path.endswith("/detect")
            return httpx.Response(200, json={"data": {"detections": [[{"language": "de", "confidence": 1}]]}})

        assert await _provider(handler).detect_language("Guten Tag") == "de"

    async def test_list_languages_with_query(self):
        def handler(request):
            assert request.url.params["target"] == "en"
            return httpx.Response(
                200,
                json={
                    "data": {
                        "languages": [
                            {"language": "en", "name": "English"},
                            {"language": "es", "name": "Spanish"},
                            {"language": "fr", "name": "French"},
                        ]
                    }
                },
            )

        provider = _provider(handler)

        assert await provider.list_languages("span") == [{"code": "es", "name": "Spanish"}]
        assert len(await provider.list_languages()) == 3

    async def test_transcribe_audio_request_body(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(
                200,
                json={"results": [{"alternatives": [{"transcript": "good morning", "confidence": 0.9}]}]},
            )

        audio = b"\x1aE\xdf\xa3webm-bytes"
        transcript = await _provider(handler).transcribe_audio(audio, language="en-GB")

        assert transcript == "good morning"
        request = seen[0]
        assert str(request.url).startswith(GOOGLE_SPEECH_API_URL)
        assert request.url.params["key"] == "speech-key"
        body = json.loads(request.content)
        assert body["config"] == {"encoding": "WEBM_OPUS", "languageCode": "en"}
        assert base64.b64decode(body["audio"]["content"]) == audio

    async def test_http_error_carries_provider_message(self):
        def handler(request):
            return httpx.Response(403, json={"error": {"code": 403, "message": "API key not valid"}})

        with pytest.raises(TranslationProviderError) as exc_info:
            await _provider(handler).translate_text("Hello", "es")

        assert exc_info.value.message == "API key not valid"
        assert exc_info.value.status_code == 403

    async def test_network_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TranslationProviderError, match="unreachable"):
            await _provider(handler).detect_language("Hello")

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="<html>not json</html>"),
            httpx.Response(200, json={"data": {}}),
            httpx.Response(200, json={"results": []}),
        ],
    )
    async def test_malformed_response(self, response):
        provider = _provider(lambda request: response)

        with pytest.raises(TranslationProviderError):
            await provider.transcribe_audio(b"audio")


class TestMockTranslationProvider:
    async def test_translate_is_deterministic(self):
        provider = MockTranslationProvider()

        result = await provider.translate_text("Hello", "es")

        assert result.translated_text == "[Mock Translation] Hello (to es)"
        assert result.detected_source_language == "en"
        assert (await provider.translate_text("Hello", "es", source_lang="en")).detected_source_language is None

    async def test_other_operations(self):
        provider = MockTranslationProvider()

        assert await provider.detect_language("anything") == "en"
        assert await provider.transcribe_audio(b"audio") == MOCK_TRANSCRIPT
        assert [language["code"] for language in await provider.list_languages("fr")] == ["fr"]


def test_filter_languages_is_case_insensitive():
    languages = [{"code": "de", "name": "German"}, {"code": "el", "name": "Greek"}]

    assert filter_languages(languages, "GER") == [{"code": "de", "name": "German"}]
    assert filter_languages(languages, "") == languages
    assert filter_languages(languages, "klingon") == []
