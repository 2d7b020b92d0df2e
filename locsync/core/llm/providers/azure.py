"""Azure OpenAI adapter.

Requests go to ``{resource}/openai/deployments/{deployment}/chat/completions``;
LiteLLM builds that path from ``api_base`` and the ``azure/`` model prefix, so
the user-supplied endpoint is reduced to the resource root first.
"""

from typing import Any, Dict

from locsync.config import settings
from locsync.core.errors import ProviderError
from locsync.core.llm.adapter import LiteLLMAdapter
from locsync.core.llm.runtime_config import ProviderConfig


def normalize_endpoint(endpoint: str) -> str:
    """Strip trailing slashes and any pasted ``/openai/...`` path."""
    base = endpoint.strip().rstrip("/")
    openai_index = base.find("/openai/")
    if openai_index != -1:
        base = base[:openai_index]
    elif base.endswith("/openai"):
        base = base[: -len("/openai")]
    return base


class AzureOpenAIAdapter(LiteLLMAdapter):
    """Azure-hosted OpenAI deployments."""

    supports_json_mode = True

    @property
    def provider_name(self) -> str:
        return "azure"

    def build_request(self, config: ProviderConfig) -> Dict[str, Any]:
        if not config.endpoint:
            raise ProviderError(self.provider_name, "Azure OpenAI requires an endpoint")
        return {
            "model": f"azure/{config.model}",
            "api_key": config.api_key,
            "api_base": normalize_endpoint(config.endpoint),
            "api_version": settings.azure_api_version,
        }
