"""Tests for the Gemini recommendation provider."""

import json
from types import SimpleNamespace

import pytest
from google.genai import errors

from brew_advisor import DEFAULT_CATALOG
from brew_advisor.exceptions import AuthenticationError, GenerationError, RateLimitError
from brew_advisor.providers.gemini import RESPONSE_SCHEMA, GeminiProvider, build_prompt, parse_json_payload

BEAN = DEFAULT_CATALOG.get_bean("3")
MACHINE = DEFAULT_CATALOG.get_machine("1")

VALID_TEXT = json.dumps(
    {
        "temperature": {"fahrenheit": 203, "celsius": 95},
        "grindSize": "medium-fine",
        "brewTime": {"minutes": 3, "seconds": 15},
        "waterRatio": {"coffee": 1, "water": 16, "description": "1:16 ratio"},
        "explanation": "Nutty Brazil beans open up on a V60.",
    }
)


def _client(text=None, error=None):
    calls = []

    class Models:
        @staticmethod
        def generate_content(model, contents, config):
            calls.append({"model": model, "contents": contents, "config": config})
            if error is not None:
                raise error
            return SimpleNamespace(text=text)

    return SimpleNamespace(models=Models(), calls=calls)


def test_unavailable_without_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    provider = GeminiProvider()

    assert not provider.is_available()
    with pytest.raises(AuthenticationError):
        provider.generate(BEAN, MACHINE)


def test_available_with_injected_client(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    assert GeminiProvider(client=_client(VALID_TEXT)).is_available()


def test_generate_returns_validated_recommendation():
    client = _client(VALID_TEXT)
    provider = GeminiProvider(api_key="test-key", client=client, model="test-model")

    rec = provider.generate(BEAN, MACHINE)

    assert rec.grind_size == "medium-fine"
    assert rec.temperature.celsius == 95
    assert len(client.calls) == 1
    call = client.calls[0]
    assert call["model"] == "test-model"
    assert call["contents"] == [build_prompt(BEAN, MACHINE)]
    assert call["config"].response_mime_type == "application/json"
    assert call["config"].response_schema == RESPONSE_SCHEMA
    assert provider.get_generation_metadata() == {"provider": "gemini", "model": "test-model"}


def test_generate_accepts_code_fenced_json():
    provider = GeminiProvider(api_key="test-key", client=_client(f"```json\n{VALID_TEXT}\n```"))
    assert provider.generate(BEAN, MACHINE).brew_time.minutes == 3


@pytest.mark.parametrize(
    "text",
    [
        None,
        "   ",
        "Here is your recipe: hot water, ground coffee.",
        '{"temperature": {"fahrenheit": "203", "celsius": 95}}',
        "[]",
    ],
)
def test_generate_raises_generation_error_on_bad_output(text):
    provider = GeminiProvider(api_key="test-key", client=_client(text))
    with pytest.raises(GenerationError):
        provider.generate(BEAN, MACHINE)


def test_generate_wraps_client_failure():
    client = _client(error=TimeoutError("timed out"))
    provider = GeminiProvider(api_key="test-key", client=client)

    with pytest.raises(GenerationError):
        provider.generate(BEAN, MACHINE)
    assert len(client.calls) == 1


def test_prompt_is_deterministic_and_mentions_inputs():
    prompt = build_prompt(BEAN, MACHINE)

    assert prompt == build_prompt(BEAN, MACHINE)
    for value in ("Illy", "Brazil", "medium", "smooth, nutty, classic", "pour-over", "Hario", "V60"):
        assert value in prompt
    assert '"grindSize"' in prompt


def test_parse_json_payload_rejects_garbage():
    with pytest.raises(GenerationError):
        parse_json_payload("{not json")


def _client_error(code, status, message):
    return errors.ClientError(code, {"error": {"code": code, "message": message, "status": status}})


def test_quota_error_maps_to_rate_limit():
    error = _client_error(429, "RESOURCE_EXHAUSTED", "Resource has been exhausted (e.g. check quota).")
    provider = GeminiProvider(api_key="test-key", client=_client(error=error))

    with pytest.raises(RateLimitError):
        provider.generate(BEAN, MACHINE)


@pytest.mark.parametrize(
    "code, status",
    [(401, "UNAUTHENTICATED"), (403, "PERMISSION_DENIED")],
)
def test_auth_error_maps_to_authentication(code, status):
    provider = GeminiProvider(api_key="test-key", client=_client(error=_client_error(code, status, "Denied.")))

    with pytest.raises(AuthenticationError):
        provider.generate(BEAN, MACHINE)


def test_bad_request_is_plain_generation_error():
    error = _client_error(400, "INVALID_ARGUMENT", "Invalid JSON payload for generateContent, moderate size")
    provider = GeminiProvider(api_key="test-key", client=_client(error=error))

    with pytest.raises(GenerationError) as excinfo:
        provider.generate(BEAN, MACHINE)

    assert not isinstance(excinfo.value, (RateLimitError, AuthenticationError))


def test_client_built_with_bounded_timeout(mocker):
    client_cls = mocker.patch("brew_advisor.providers.gemini.genai.Client")

    provider = GeminiProvider(api_key="k", timeout_sec=2.5)

    assert provider.is_available()
    client_cls.assert_called_once()
    kwargs = client_cls.call_args.kwargs
    assert kwargs["api_key"] == "k"
    assert kwargs["http_options"].timeout == 2500


def test_no_client_built_without_key(mocker, monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    client_cls = mocker.patch("brew_advisor.providers.gemini.genai.Client")

    provider = GeminiProvider()

    assert not provider.is_available()
    client_cls.assert_not_called()
