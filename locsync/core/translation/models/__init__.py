"""Translation pipeline data models.

This module provides structured data models for the translation pipeline,
ensuring type safety and clear contracts between components.
"""

from .prompt import Message, PromptBundle
from .progress import LogSeverity, ProgressEvent, ProgressSink
from .result import BatchResult
from .unit import Batch, BatchItem, TranslatableUnit

__all__ = [
    # Unit models
    "TranslatableUnit",
    "BatchItem",
    "Batch",
    # Prompt models
    "Message",
    "PromptBundle",
    # Result models
    "BatchResult",
    # Progress models
    "LogSeverity",
    "ProgressEvent",
    "ProgressSink",
]
