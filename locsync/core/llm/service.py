"""LLM Service - provider catalog, connection tests and free-form completion."""

import logging
from typing import Optional

from pydantic import BaseModel

from locsync.core.errors import ProviderError
from locsync.core.llm.adapter import ProviderAdapter
from locsync.core.llm.config import DEFAULT_PROVIDERS, SUPPORTED_LANGUAGES, LanguageInfo, LLMProviderConfig
from locsync.core.llm.providers.factory import LLMProviderFactory
from locsync.core.llm.runtime_config import ProviderConfig
from locsync.core.translation.pipeline.output_processor import OutputProcessor

logger = logging.getLogger(__name__)

TEST_MESSAGE = "Say 'API connection successful' in exactly those words."
ASSISTANT_SYSTEM_PROMPT = (
    "You are a helpful assistant. Follow the user's instructions precisely "
    "and respond with only the requested output."
)


class ConnectionTestResult(BaseModel):
    """Outcome of a provider connection test."""
    success: bool
    message: str
    provider: str
    model: str


class LLMService:
    """Provider-facing helpers shared by the API routes."""

    def get_providers(self) -> list[LLMProviderConfig]:
        """Providers that have a registered adapter."""
        available = set(LLMProviderFactory.available_providers())
        return [p for p in DEFAULT_PROVIDERS if p.name in available]

    def get_languages(self) -> list[LanguageInfo]:
        return list(SUPPORTED_LANGUAGES)

    async def test_connection(
        self,
        config: ProviderConfig,
        adapter: Optional[ProviderAdapter] = None,
    ) -> ConnectionTestResult:
        """Send a tiny prompt and report whether the provider answered.

        Never raises; failures are reported in the result message.
        """
        try:
            adapter = adapter or LLMProviderFactory.create(config.provider)
            await adapter.send(
                "You are a connectivity check.",
                TEST_MESSAGE,
                config,
                json_mode=False,
            )
        except (ProviderError, ValueError) as e:
            message = e.message if isinstance(e, ProviderError) else str(e)
            logger.warning(f"Connection test failed: {config.describe()}, error={message}")
            return ConnectionTestResult(
                success=False, message=message, provider=config.provider, model=config.model
            )

        return ConnectionTestResult(
            success=True,
            message="API connection successful!",
            provider=config.provider,
            model=config.model,
        )

    async def complete_text(
        self,
        prompt: str,
        config: ProviderConfig,
        adapter: Optional[ProviderAdapter] = None,
    ) -> str:
        """Run a single free-form completion (keyword ideas, rewrites).

        Raises:
            ProviderError: If the provider call fails
            ValueError: If the provider id is unknown
        """
        adapter = adapter or LLMProviderFactory.create(config.provider)
        content = await adapter.send(ASSISTANT_SYSTEM_PROMPT, prompt, config, json_mode=False)
        return OutputProcessor.strip_code_fences(content)


llm_service = LLMService()
