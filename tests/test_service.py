from __future__ import annotations

import asyncio

import pytest

from locsync.core.errors import ProviderError
from locsync.core.llm.runtime_config import ProviderConfig
from locsync.core.llm.service import LLMService

from conftest import ScriptedAdapter


@pytest.fixture
def service() -> LLMService:
    return LLMService()


def test_providers_and_languages(service) -> None:
    names = [p.name for p in service.get_providers()]
    assert names == ["openai", "azure", "bedrock", "github"]
    codes = [lang.code for lang in service.get_languages()]
    assert "fr" in codes and "zh-Hans" in codes


def test_connection_success(service, provider_config) -> None:
    adapter = ScriptedAdapter("API connection successful")

    result = asyncio.run(service.test_connection(provider_config, adapter=adapter))

    assert result.success
    assert result.provider == "openai"
    assert result.model == "gpt-5-mini"
    assert adapter.json_modes == [False]


def test_connection_failure_is_reported(service, provider_config) -> None:
    adapter = ScriptedAdapter(error=ProviderError("openai", "Incorrect API key provided"))

    result = asyncio.run(service.test_connection(provider_config, adapter=adapter))

    assert not result.success
    assert result.message == "Incorrect API key provided"


def test_connection_unknown_provider(service) -> None:
    config = ProviderConfig(provider="mystery", api_key="k", model="m")

    result = asyncio.run(service.test_connection(config))

    assert not result.success
    assert "Unknown provider" in result.message


def test_complete_text_strips_fences(service, provider_config) -> None:
    adapter = ScriptedAdapter("```\nphoto editor, collage, filters\n```")

    text = asyncio.run(service.complete_text("Suggest keywords", provider_config, adapter=adapter))

    assert text == "photo editor, collage, filters"
    assert adapter.json_modes == [False]


def test_complete_text_propagates_provider_errors(service, provider_config) -> None:
    adapter = ScriptedAdapter(error=ProviderError("openai", "quota exceeded"))

    with pytest.raises(ProviderError):
        asyncio.run(service.complete_text("Suggest keywords", provider_config, adapter=adapter))
