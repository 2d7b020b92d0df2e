"""Provider adapter factory."""

from typing import Type

from locsync.core.llm.adapter import ProviderAdapter
from locsync.core.llm.providers.azure import AzureOpenAIAdapter
from locsync.core.llm.providers.bedrock import BedrockAdapter
from locsync.core.llm.providers.github import GitHubModelsAdapter
from locsync.core.llm.providers.openai import OpenAIAdapter


class LLMProviderFactory:
    """Factory for creating provider adapter instances."""

    _providers: dict[str, Type[ProviderAdapter]] = {
        "openai": OpenAIAdapter,
        "azure": AzureOpenAIAdapter,
        "bedrock": BedrockAdapter,
        "github": GitHubModelsAdapter,
    }

    @classmethod
    def register(cls, name: str, provider_class: Type[ProviderAdapter]):
        """Register a new provider family."""
        cls._providers[name] = provider_class

    @classmethod
    def create(cls, provider: str) -> ProviderAdapter:
        """Create an adapter for ``provider``.

        Raises:
            ValueError: If the provider family is unknown
        """
        if provider not in cls._providers:
            raise ValueError(f"Unknown provider: {provider}. Available: {list(cls._providers.keys())}")
        return cls._providers[provider]()

    @classmethod
    def available_providers(cls) -> list[str]:
        """List available providers."""
        return list(cls._providers.keys())
