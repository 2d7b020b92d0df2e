"""LLM provider access for locsync."""

from locsync.core.llm.adapter import LiteLLMAdapter, ProviderAdapter
from locsync.core.llm.config import (
    DEFAULT_PROVIDERS,
    LANGUAGE_NAMES,
    SUPPORTED_LANGUAGES,
    LanguageInfo,
    LLMProviderConfig,
)
from locsync.core.llm.providers import LLMProviderFactory
from locsync.core.llm.runtime_config import ProviderConfig

__all__ = [
    "ProviderAdapter",
    "LiteLLMAdapter",
    "LLMProviderFactory",
    "ProviderConfig",
    "LLMProviderConfig",
    "LanguageInfo",
    "DEFAULT_PROVIDERS",
    "SUPPORTED_LANGUAGES",
    "LANGUAGE_NAMES",
]
