"""GitHub Models adapter.

The GitHub inference gateway speaks the OpenAI chat-completions protocol, so
it is routed like any OpenAI-compatible endpoint with a custom base URL.
"""

from typing import Any, Dict

from locsync.config import settings
from locsync.core.llm.adapter import LiteLLMAdapter
from locsync.core.llm.runtime_config import ProviderConfig


class GitHubModelsAdapter(LiteLLMAdapter):
    """GitHub-hosted inference gateway (no JSON mode)."""

    @property
    def provider_name(self) -> str:
        return "github"

    def build_request(self, config: ProviderConfig) -> Dict[str, Any]:
        model = config.model
        if not model.startswith("openai/"):
            model = f"openai/{model}"
        return {
            "model": model,
            "api_key": config.api_key,
            "api_base": settings.github_models_base_url,
        }
