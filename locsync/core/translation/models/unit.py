"""Translation unit and batch models.

A TranslatableUnit is one catalog key that still lacks at least one target
locale. Units are built once per pipeline run and never change afterwards.
"""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class TranslatableUnit(BaseModel):
    """A source string and the locales it is still missing."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Catalog key, unique within a run")
    source_text: str = Field(..., description="Text in the source locale")
    missing_locales: Tuple[str, ...] = Field(
        ..., description="Target locales without a translation, in request order"
    )


class BatchItem(BaseModel):
    """A unit paired with the placeholder sequence captured at scan time."""

    model_config = ConfigDict(frozen=True)

    unit: TranslatableUnit
    placeholders: Tuple[str, ...] = ()


class Batch(BaseModel):
    """Units sent to the provider in a single request."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., description="Position of the batch within the run")
    items: Tuple[BatchItem, ...]

    @property
    def units(self) -> List[TranslatableUnit]:
        return [item.unit for item in self.items]

    def __len__(self) -> int:
        return len(self.items)
