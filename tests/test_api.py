from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from locsync.core.errors import ProviderError
from locsync.core.llm.providers.factory import LLMProviderFactory
from locsync.main import app

from conftest import FakeAdapter, ScriptedAdapter, localized_value, make_document

CREDENTIALS = {"provider": "openai", "api_key": "sk-test", "model": "gpt-5-mini"}


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def use_adapter(monkeypatch):
    """Route every provider id to the given adapter instance."""

    def install(adapter):
        monkeypatch.setattr(LLMProviderFactory, "create", classmethod(lambda cls, provider: adapter))
        return adapter

    return install


def test_root_and_health(client) -> None:
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["message"] == "locsync API"


def test_list_providers(client) -> None:
    response = client.get("/api/v1/llm/providers")

    assert response.status_code == 200
    providers = {p["name"]: p for p in response.json()}
    assert set(providers) == {"openai", "azure", "bedrock", "github"}
    assert providers["bedrock"]["needs_region"] is True
    assert providers["azure"]["needs_endpoint"] is True


def test_get_unknown_provider(client) -> None:
    assert client.get("/api/v1/llm/providers/nope").status_code == 404


def test_list_languages(client) -> None:
    languages = client.get("/api/v1/llm/languages").json()

    assert {"code": "fr", "name": "French", "flag": "🇫🇷"} in languages


def test_connection_endpoint_reports_failure(client, use_adapter) -> None:
    use_adapter(ScriptedAdapter(error=ProviderError("openai", "Invalid API key")))

    response = client.post("/api/v1/llm/test", json=CREDENTIALS)

    assert response.status_code == 200
    assert response.json()["success"] is False
    assert response.json()["message"] == "Invalid API key"


def test_translate_strings_endpoint(client, use_adapter) -> None:
    use_adapter(FakeAdapter(translate=lambda text: {"fr": f"FR {text}"}))
    document = make_document({"hello": {"en": "Hello"}, "done": {"en": "Done", "fr": "Fini"}})

    response = client.post(
        "/api/v1/translation/strings",
        json={**CREDENTIALS, "document": document, "target_locales": ["fr"]},
    )

    assert response.status_code == 200
    body = response.json()
    assert localized_value(body["document"], "hello", "fr") == "FR Hello"
    assert localized_value(body["document"], "done", "fr") == "Fini"
    assert body["events"][-1]["current"] == body["events"][-1]["total"] == 1
    assert {e["log_severity"] for e in body["events"]} <= {"info", "success", "error"}


def test_translate_strings_rejects_invalid_document(client, use_adapter) -> None:
    use_adapter(FakeAdapter())

    response = client.post(
        "/api/v1/translation/strings",
        json={**CREDENTIALS, "document": {"strings": []}, "target_locales": ["fr"]},
    )

    assert response.status_code == 400


def test_translate_strings_unknown_provider(client) -> None:
    response = client.post(
        "/api/v1/translation/strings",
        json={
            **CREDENTIALS,
            "provider": "nope",
            "document": make_document({"a": {"en": "A"}}),
            "target_locales": ["fr"],
        },
    )

    assert response.status_code == 400
    assert "Unknown provider" in response.json()["detail"]


def test_translate_strings_validates_batching(client) -> None:
    response = client.post(
        "/api/v1/translation/strings",
        json={
            **CREDENTIALS,
            "document": make_document({"a": {"en": "A"}}),
            "target_locales": ["fr"],
            "batch_size": 0,
        },
    )

    assert response.status_code == 422


def test_translate_text_endpoint(client, use_adapter) -> None:
    use_adapter(ScriptedAdapter("```text\nShort and sweet\n```"))

    response = client.post("/api/v1/translation/text", json={**CREDENTIALS, "prompt": "Shorten"})

    assert response.status_code == 200
    assert response.json() == {"text": "Short and sweet"}


def test_translate_text_provider_failure(client, use_adapter) -> None:
    use_adapter(ScriptedAdapter(error=ProviderError("openai", "quota exceeded")))

    response = client.post("/api/v1/translation/text", json={**CREDENTIALS, "prompt": "Shorten"})

    assert response.status_code == 502
    assert response.json()["detail"] == "quota exceeded"
