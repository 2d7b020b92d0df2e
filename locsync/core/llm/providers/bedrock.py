"""AWS Bedrock adapter using the converse API."""

from typing import Any, Dict

from locsync.config import settings
from locsync.core.errors import ProviderError
from locsync.core.llm.adapter import LiteLLMAdapter
from locsync.core.llm.runtime_config import ProviderConfig


class BedrockAdapter(LiteLLMAdapter):
    """Bedrock converse with a bearer API key.

    Converse has no JSON mode; the prompt contract alone asks for JSON.
    Generation parameters map to ``inferenceConfig``.
    """

    # Bedrock error bodies are {"message": "..."}
    error_message_path = ("message",)

    @property
    def provider_name(self) -> str:
        return "bedrock"

    def build_request(self, config: ProviderConfig) -> Dict[str, Any]:
        if not config.region:
            raise ProviderError(self.provider_name, "AWS Bedrock requires a region")
        return {
            "model": f"bedrock/converse/{config.model}",
            "api_key": config.api_key,
            "aws_region_name": config.region,
            "temperature": settings.bedrock_temperature,
            "max_tokens": settings.bedrock_max_tokens,
        }
