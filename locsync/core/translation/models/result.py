"""Batch result models.

This module defines the per-unit output of the batch scheduler, including
which locales were accepted and which were rejected after validation.
"""

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field


class BatchResult(BaseModel):
    """Outcome for one TranslatableUnit.

    ``translations`` holds what the provider returned for the unit.
    ``accepted`` and ``rejected`` are filled in by the scheduler once the
    placeholder check has run; a unit with ``error`` set has neither.
    """

    key: str
    source_text: str
    missing_locales: Tuple[str, ...] = ()
    translations: Dict[str, str] = Field(default_factory=dict)
    error: Optional[str] = Field(
        default=None, description="Batch or item level failure description"
    )

    accepted: Dict[str, str] = Field(
        default_factory=dict, description="Locale -> translation that passed validation"
    )
    rejected: Dict[str, str] = Field(
        default_factory=dict, description="Locale -> reason the translation was dropped"
    )

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def filled_count(self) -> int:
        return len(self.accepted)

    def is_complete(self) -> bool:
        """True when every missing locale received an accepted translation."""
        return not self.failed and set(self.accepted) == set(self.missing_locales)
