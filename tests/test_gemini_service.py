from __future__ import annotations

import asyncio

import pytest
from google.api_core import exceptions as google_exceptions

from hackathon_scorer.errors import ConfigurationError, EmptyResponseError, UpstreamError
from hackathon_scorer.services import gemini_service
from hackathon_scorer.services.gemini_service import GeminiServices


class FakeResponse:
    def __init__(self, text=None, error=None):
        self._text = text
        self._error = error

    @property
    def text(self):
        if self._error:
            raise self._error
        return self._text


def install_fake_model(monkeypatch, response=None, error=None):
    calls = []
    configured = {}

    class FakeModel:
        def __init__(self, model_name):
            self.model_name = model_name

        async def generate_content_async(self, contents, generation_config=None, request_options=None):
            calls.append({
                "model": self.model_name,
                "contents": contents,
                "generation_config": generation_config,
                "request_options": request_options,
            })
            if error:
                raise error
            return response

    monkeypatch.setattr(gemini_service.genai, "GenerativeModel", FakeModel)
    monkeypatch.setattr(gemini_service.genai, "configure", lambda api_key: configured.update(api_key=api_key))
    return calls, configured


def test_generate_sends_single_user_message_at_low_temperature(monkeypatch):
    calls, configured = install_fake_model(monkeypatch, response=FakeResponse("  {\"total\": 1}  "))

    text = asyncio.run(GeminiServices().generate("gemini-test", "score this", api_key="k-123"))

    assert text == '{"total": 1}'
    assert configured["api_key"] == "k-123"
    assert calls[0]["model"] == "gemini-test"
    assert calls[0]["contents"] == [{"role": "user", "parts": ["score this"]}]
    assert calls[0]["generation_config"]["temperature"] == 0.2


def test_environment_key_used_when_none_supplied(monkeypatch):
    _, configured = install_fake_model(monkeypatch, response=FakeResponse("ok"))
    monkeypatch.setattr(gemini_service.settings, "gemini_api_key", "env-key")

    asyncio.run(GeminiServices().generate("m", "p"))
    assert configured["api_key"] == "env-key"


def test_missing_key_is_configuration_error(monkeypatch):
    calls, _ = install_fake_model(monkeypatch, response=FakeResponse("ok"))
    monkeypatch.setattr(gemini_service.settings, "gemini_api_key", None)

    with pytest.raises(ConfigurationError):
        asyncio.run(GeminiServices().generate("m", "p"))
    assert calls == []


def test_api_failure_is_upstream_error_with_truncated_body(monkeypatch):
    install_fake_model(monkeypatch, error=google_exceptions.PermissionDenied("x" * 1000))

    with pytest.raises(UpstreamError) as info:
        asyncio.run(GeminiServices().generate("m", "p", api_key="k"))

    assert info.value.status_code == 403
    assert len(info.value.body) == 400
    assert str(info.value).startswith("Gemini error 403:")


@pytest.mark.parametrize("response", [
    FakeResponse("   \n "),
    FakeResponse(None),
    FakeResponse(error=ValueError("no parts")),
])
def test_blank_reply_is_empty_response_error(monkeypatch, response):
    install_fake_model(monkeypatch, response=response)

    with pytest.raises(EmptyResponseError):
        asyncio.run(GeminiServices().generate("m", "p", api_key="k"))


def test_unavailable_service_fails_after_one_attempt(monkeypatch):
    calls, _ = install_fake_model(monkeypatch, error=google_exceptions.ServiceUnavailable("overloaded"))

    with pytest.raises(UpstreamError) as info:
        asyncio.run(GeminiServices().generate("m", "p", api_key="k"))

    assert info.value.status_code == 503
    assert len(calls) == 1
    assert calls[0]["request_options"] == {"retry": None}
