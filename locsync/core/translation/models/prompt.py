"""Prompt bundle models.

This module defines the prompt data structures that are passed to provider
adapters, independent of any backend's wire format.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class Message(BaseModel):
    """Single message in LLM conversation."""

    role: str = Field(
        ..., description="Message role: 'system', 'user', or 'assistant'"
    )
    content: str = Field(..., description="Message content")


class PromptBundle(BaseModel):
    """Complete prompt package ready for a provider adapter.

    Output of the PromptBuilder. Adapters only ever see the system and user
    message text, so the bundle is a typed carrier for the two message texts.
    """

    messages: List[Message] = Field(..., description="Conversation messages")

    # "single" or "batch"
    mode: str = Field(default="single", description="Request shape")

    target_locales: List[str] = Field(
        default_factory=list, description="Locales the response must cover"
    )
    item_count: int = Field(
        default=1, description="Number of source texts addressed by the prompt"
    )

    @property
    def system_prompt(self) -> Optional[str]:
        """Extract system prompt from messages."""
        for msg in self.messages:
            if msg.role == "system":
                return msg.content
        return None

    @property
    def user_prompt(self) -> Optional[str]:
        """Extract user prompt from messages."""
        for msg in self.messages:
            if msg.role == "user":
                return msg.content
        return None
