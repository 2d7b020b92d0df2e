"""Translation pipeline components.

This module provides the core pipeline components for catalog translation:
- placeholders: Format specifier scanning
- PromptEngine: Builds single-text and batch prompts
- OutputProcessor: Parses raw provider responses
- BatchScheduler: Runs batches in bounded, paced waves
- TranslationPipeline: Orchestrates the complete flow
"""

from .output_processor import OutputProcessor
from .pipeline import (
    PipelineConfig,
    StringUnitState,
    TranslationPipeline,
    translate_single,
    translate_strings,
)
from .placeholders import placeholders_match, scan
from .prompt_engine import PromptEngine
from .scheduler import BatchScheduler

__all__ = [
    "scan",
    "placeholders_match",
    "PromptEngine",
    "OutputProcessor",
    "BatchScheduler",
    "TranslationPipeline",
    "PipelineConfig",
    "StringUnitState",
    "translate_single",
    "translate_strings",
]
