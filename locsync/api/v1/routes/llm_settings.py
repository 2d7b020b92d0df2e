"""LLM settings API routes."""

from fastapi import APIRouter, HTTPException

from locsync.core.llm.config import LanguageInfo, LLMProviderConfig
from locsync.core.llm.service import ConnectionTestResult, llm_service
from locsync.models.schemas.llm import ProviderConfigMixin

router = APIRouter()


class TestConnectionRequest(ProviderConfigMixin):
    """Request to test a provider connection."""


@router.get("/llm/providers")
async def list_providers() -> list[LLMProviderConfig]:
    """List provider families with their models and required fields."""
    return llm_service.get_providers()


@router.get("/llm/providers/{provider}")
async def get_provider(provider: str) -> LLMProviderConfig:
    """Get the catalog entry of one provider family."""
    for entry in llm_service.get_providers():
        if entry.name == provider:
            return entry
    raise HTTPException(status_code=404, detail=f"Provider '{provider}' not found")


@router.get("/llm/languages")
async def list_languages() -> list[LanguageInfo]:
    """List the target languages offered for translation."""
    return llm_service.get_languages()


@router.post("/llm/test")
async def test_connection(request: TestConnectionRequest) -> ConnectionTestResult:
    """Test a provider connection.

    Always answers 200; ``success`` tells whether the provider replied.
    """
    return await llm_service.test_connection(request.to_provider_config())
