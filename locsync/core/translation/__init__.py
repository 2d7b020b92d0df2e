"""Catalog translation: units, prompts, scheduling and orchestration."""

from .models import (
    Batch,
    BatchItem,
    BatchResult,
    LogSeverity,
    ProgressEvent,
    PromptBundle,
    TranslatableUnit,
)
from .pipeline import (
    BatchScheduler,
    OutputProcessor,
    PipelineConfig,
    PromptEngine,
    StringUnitState,
    TranslationPipeline,
    translate_strings,
)

__all__ = [
    "TranslatableUnit",
    "Batch",
    "BatchItem",
    "BatchResult",
    "LogSeverity",
    "ProgressEvent",
    "PromptBundle",
    "PromptEngine",
    "OutputProcessor",
    "BatchScheduler",
    "TranslationPipeline",
    "PipelineConfig",
    "StringUnitState",
    "translate_strings",
]
