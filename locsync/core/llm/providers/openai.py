"""OpenAI adapter - Uses LiteLLM for unified model access."""

from typing import Any, Dict

from locsync.core.llm.adapter import LiteLLMAdapter
from locsync.core.llm.runtime_config import ProviderConfig


class OpenAIAdapter(LiteLLMAdapter):
    """OpenAI chat completions with JSON mode."""

    supports_json_mode = True

    @property
    def provider_name(self) -> str:
        return "openai"

    def build_request(self, config: ProviderConfig) -> Dict[str, Any]:
        # Ensure openai/ prefix for proper LiteLLM routing
        model = config.model
        if not model.startswith("openai/"):
            model = f"openai/{model}"
        return {
            "model": model,
            "api_key": config.api_key,
        }
