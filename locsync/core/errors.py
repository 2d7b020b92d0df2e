"""Error taxonomy for the translation pipeline.

Provider, parsing and placeholder failures are recorded per batch or per
locale and never escape the scheduler. ``InvalidDocumentError`` is the only
error a caller sees from ``TranslationPipeline.translate``.
"""

from typing import Sequence


class LocSyncError(Exception):
    """Base class for locsync errors."""


class ProviderError(LocSyncError):
    """A provider call failed or returned an unusable envelope."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        self.message = message
        super().__init__(f"{provider}: {message}")


class MalformedResponseError(LocSyncError):
    """Provider text could not be read as the expected JSON contract."""


class PlaceholderViolation(LocSyncError):
    """A translation dropped, added or reordered format specifiers."""

    def __init__(self, locale: str, expected: Sequence[str], found: Sequence[str]):
        self.locale = locale
        self.expected = list(expected)
        self.found = list(found)
        super().__init__(
            f"placeholder mismatch for {locale}: expected "
            f"[{', '.join(self.expected)}], got [{', '.join(self.found)}]"
        )


class InvalidDocumentError(LocSyncError, ValueError):
    """The source string catalog cannot be read."""
