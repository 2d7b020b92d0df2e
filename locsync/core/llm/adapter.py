"""Abstract provider adapter interface.

Every backend family implements ``send``: take a system and a user message,
make exactly one provider call and return the assistant's text. Failures are
reported as ``ProviderError`` with the backend's own message. Retries are the
transport's business, not the adapter's.
"""

import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from litellm import acompletion

from locsync.config import settings
from locsync.core.errors import ProviderError
from locsync.core.llm.runtime_config import ProviderConfig
from locsync.utils.text import preview_json

logger = logging.getLogger(__name__)


class ProviderAdapter(ABC):
    """Abstract base class for provider families."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider family id."""
        pass

    @abstractmethod
    async def send(
        self,
        system_message: str,
        user_message: str,
        config: ProviderConfig,
        *,
        json_mode: bool = True,
    ) -> str:
        """Send one system/user exchange and return the raw assistant text.

        Args:
            system_message: Instruction message
            user_message: Request message
            config: Provider connection parameters
            json_mode: Ask the backend for a JSON object when it supports it

        Raises:
            ProviderError: On transport failure, error envelope or missing content
        """
        pass


class LiteLLMAdapter(ProviderAdapter):
    """Shared implementation for families reached through LiteLLM.

    Subclasses describe their endpoint shape in ``build_request`` and may
    refine how content and error messages are pulled out of the envelope.
    """

    # Whether the backend accepts response_format={"type": "json_object"}
    supports_json_mode: bool = False

    # Where the provider puts its message inside a JSON error body
    error_message_path: tuple = ("error", "message")

    @abstractmethod
    def build_request(self, config: ProviderConfig) -> Dict[str, Any]:
        """Return LiteLLM kwargs (model, credentials, endpoint) for ``config``."""
        pass

    def build_messages(self, system_message: str, user_message: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": system_message},
            {"role": "user", "content": user_message},
        ]

    async def send(
        self,
        system_message: str,
        user_message: str,
        config: ProviderConfig,
        *,
        json_mode: bool = True,
    ) -> str:
        start_time = time.time()

        kwargs = self.build_request(config)
        kwargs["messages"] = self.build_messages(system_message, user_message)
        kwargs.setdefault("timeout", settings.llm_request_timeout)
        if json_mode and self.supports_json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        logger.info(f"Provider call: {config.describe()}, litellm_model={kwargs['model']}")

        try:
            response = await acompletion(**kwargs)
        except Exception as e:
            message = self.extract_error(e)
            logger.error(f"Provider call failed: {config.describe()}, error={message}")
            raise ProviderError(self.provider_name, message) from e

        content = self.extract_content(response)

        latency_ms = int((time.time() - start_time) * 1000)
        logger.info(f"Provider response: provider={self.provider_name}, latency={latency_ms}ms")
        return content

    def extract_content(self, response: Any) -> str:
        """Pull the assistant text out of a chat-completions envelope."""
        choices = getattr(response, "choices", None)
        if not choices:
            raise ProviderError(
                self.provider_name,
                f"Invalid API response: missing choices. Response: {_dump(response)}",
            )
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not content:
            raise ProviderError(self.provider_name, "Empty response: no message content")
        return content

    def extract_error(self, error: Exception) -> str:
        """Best-effort provider message from a LiteLLM exception."""
        message = str(getattr(error, "message", None) or error) or type(error).__name__
        return message_from_body(message, self.error_message_path) or message


def message_from_body(text: str, path: tuple) -> Optional[str]:
    """Read a nested message out of a JSON error body embedded in ``text``."""
    start = text.find("{")
    if start == -1:
        return None
    try:
        body = json.loads(text[start:])
    except ValueError:
        return None
    for part in path:
        if not isinstance(body, dict) or part not in body:
            return None
        body = body[part]
    return body if isinstance(body, str) and body else None


def _dump(response: Any) -> str:
    if hasattr(response, "model_dump"):
        return preview_json(response.model_dump())
    return preview_json(response)
