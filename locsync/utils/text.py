"""Text utilities for labels and log-safe previews."""

import json
from typing import Any


def truncate_label(text: str, max_chars: int = 40, suffix: str = "...") -> str:
    """Cut ``text`` to ``max_chars`` characters for progress labels.

    Args:
        text: Text to shorten
        max_chars: Maximum characters kept before the suffix
        suffix: Appended only when the text was cut

    Returns:
        The original text, or its first ``max_chars`` characters plus suffix
    """
    if not text or len(text) <= max_chars:
        return text or ""
    return text[:max_chars] + suffix


def preview_json(value: Any, max_chars: int = 200) -> str:
    """Serialize ``value`` for an error message, cut to ``max_chars``.

    Falls back to ``str(value)`` for objects JSON cannot encode.
    """
    try:
        text = json.dumps(value, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        text = str(value)
    return text[:max_chars]
