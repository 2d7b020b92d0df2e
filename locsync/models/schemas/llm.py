"""Shared LLM-related request schemas.

These base classes eliminate repetition of provider configuration fields
across the API endpoints.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from locsync.core.llm.runtime_config import ProviderConfig
from locsync.core.translation.models.progress import ProgressEvent


class ProviderConfigMixin(BaseModel):
    """Mixin for provider connection fields."""

    provider: str  # "openai" | "azure" | "bedrock" | "github"
    api_key: str
    model: str
    region: Optional[str] = None  # bedrock
    endpoint: Optional[str] = None  # azure

    def to_provider_config(self) -> ProviderConfig:
        return ProviderConfig(
            provider=self.provider,
            api_key=self.api_key,
            model=self.model,
            region=self.region,
            endpoint=self.endpoint,
        )


class TranslateStringsRequest(ProviderConfigMixin):
    """Translate the missing locales of a string catalog."""

    document: Any  # validated by the pipeline, malformed input -> 400
    target_locales: list[str] = Field(..., min_length=1)
    protected_words: list[str] = Field(default_factory=list)
    batch_size: Optional[int] = Field(default=None, ge=1)
    concurrency: Optional[int] = Field(default=None, ge=1)


class TranslateStringsResponse(BaseModel):
    """Updated catalog plus every progress event of the run."""

    document: dict[str, Any]
    events: list[ProgressEvent]


class TranslateTextRequest(ProviderConfigMixin):
    """Free-form completion request."""

    prompt: str = Field(..., min_length=1)
