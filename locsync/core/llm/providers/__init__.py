"""Provider adapter implementations."""

from .azure import AzureOpenAIAdapter
from .bedrock import BedrockAdapter
from .factory import LLMProviderFactory
from .github import GitHubModelsAdapter
from .openai import OpenAIAdapter

__all__ = [
    "OpenAIAdapter",
    "AzureOpenAIAdapter",
    "BedrockAdapter",
    "GitHubModelsAdapter",
    "LLMProviderFactory",
]
