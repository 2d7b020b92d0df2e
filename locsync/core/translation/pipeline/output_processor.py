"""Output processor for provider responses.

This module turns raw provider text into locale -> translation mappings.
It tolerates code-fence wrapping and stray whitespace, and fails closed with
MalformedResponseError when the payload is not the expected JSON object.
"""

import json
import re
from typing import Any, Dict

from locsync.core.errors import MalformedResponseError
from locsync.utils.text import truncate_label

# ```json, ```JSON, ``` at the start; ``` at the end
_OPENING_FENCE = re.compile(r"^```[A-Za-z]*[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?```$")


class OutputProcessor:
    """Parses single-text and batch translation responses."""

    @staticmethod
    def strip_code_fences(content: str) -> str:
        """Remove a leading/trailing markdown code fence, if present."""
        content = content.strip()
        content = _OPENING_FENCE.sub("", content, count=1)
        content = _CLOSING_FENCE.sub("", content, count=1)
        return content.strip()

    @classmethod
    def load_json_object(cls, content: str) -> Dict[str, Any]:
        """Parse fenced or bare JSON text into a dict.

        Raises:
            MalformedResponseError: If the text is not a JSON object
        """
        cleaned = cls.strip_code_fences(content or "")
        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise MalformedResponseError(
                f"Response is not valid JSON ({e.msg}): {truncate_label(cleaned, 120)}"
            ) from e
        if not isinstance(parsed, dict):
            raise MalformedResponseError(
                f"Expected a JSON object, got {type(parsed).__name__}"
            )
        return parsed

    @classmethod
    def parse_single(cls, content: str) -> Dict[str, str]:
        """Read ``{"translations": {locale: text}}``.

        A missing ``translations`` key yields an empty mapping.
        """
        parsed = cls.load_json_object(content)
        translations = parsed.get("translations") or {}
        if not isinstance(translations, dict):
            raise MalformedResponseError("'translations' must be a JSON object")
        return cls._clean_locale_map(translations)

    @classmethod
    def parse_batch(cls, content: str, expected_count: int) -> Dict[int, Dict[str, str]]:
        """Read ``{"<index>": {locale: text}}`` for indices 0..expected_count-1.

        Indices absent from the response, or whose value is not an object,
        map to an empty dict. Extra indices are ignored.
        """
        parsed = cls.load_json_object(content)
        results: Dict[int, Dict[str, str]] = {}
        for index in range(expected_count):
            entry = parsed.get(str(index))
            results[index] = cls._clean_locale_map(entry) if isinstance(entry, dict) else {}
        return results

    @staticmethod
    def _clean_locale_map(raw: Dict[str, Any]) -> Dict[str, str]:
        # Non-string values (null, numbers, nested objects) are dropped
        return {
            str(locale): text
            for locale, text in raw.items()
            if isinstance(text, str)
        }
