"""Request/response schemas for the HTTP API."""

from .llm import ProviderConfigMixin, TranslateStringsRequest, TranslateStringsResponse, TranslateTextRequest

__all__ = [
    "ProviderConfigMixin",
    "TranslateStringsRequest",
    "TranslateStringsResponse",
    "TranslateTextRequest",
]
