"""Provider runtime configuration.

A ProviderConfig is handed in by the caller with a ready-to-use credential.
The scheduler never looks inside it; only the adapter for ``provider`` does.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ProviderConfig(BaseModel):
    """Connection parameters for a single provider family."""

    provider: str = Field(..., description="Provider family id: openai, azure, bedrock, github")
    api_key: str = Field(..., description="Bearer token or API key")
    model: str = Field(..., description="Model id or deployment name")
    region: Optional[str] = Field(default=None, description="Cloud region (bedrock)")
    endpoint: Optional[str] = Field(default=None, description="Resource endpoint (azure)")

    def describe(self) -> str:
        """Log-safe summary without the credential."""
        parts = [f"provider={self.provider}", f"model={self.model}"]
        if self.region:
            parts.append(f"region={self.region}")
        if self.endpoint:
            parts.append(f"endpoint={self.endpoint}")
        return ", ".join(parts)
