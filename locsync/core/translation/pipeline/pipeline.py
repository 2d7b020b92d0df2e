"""Main translation pipeline orchestrator.

This module provides the TranslationPipeline class that turns a string
catalog into translation units, drives the BatchScheduler and writes accepted
translations back into a private copy of the catalog.
"""

import copy
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from locsync.config import resolve_batching, settings
from locsync.core.errors import InvalidDocumentError, MalformedResponseError, ProviderError
from locsync.core.llm.adapter import ProviderAdapter
from locsync.core.llm.providers.factory import LLMProviderFactory
from locsync.core.llm.runtime_config import ProviderConfig
from ..models.progress import LogSeverity, ProgressEvent, ProgressSink, emit
from ..models.result import BatchResult
from ..models.unit import TranslatableUnit
from .output_processor import OutputProcessor
from .prompt_engine import PromptEngine
from .scheduler import BatchScheduler

logger = logging.getLogger(__name__)


class StringUnitState(str, Enum):
    """Catalog states for a localized string."""

    NEW = "new"
    TRANSLATED = "translated"
    NEEDS_REVIEW = "needs_review"


@dataclass
class PipelineConfig:
    """Configuration for a translation run."""

    provider_config: ProviderConfig
    target_locales: List[str]
    protected_words: List[str] = field(default_factory=list)
    batch_size: Optional[int] = None
    concurrency: Optional[int] = None
    wave_delay: Optional[float] = None
    source_locale: Optional[str] = None  # Defaults to document sourceLanguage


def collect_units(
    document: Dict[str, Any],
    target_locales: Sequence[str],
    source_locale: str,
) -> List[TranslatableUnit]:
    """Find every key still missing one of ``target_locales``.

    Keys whose source text is empty or whitespace-only are skipped. The key
    itself is used as the source text when the source locale is absent. A
    locale counts as missing when its entry is absent, null or empty.

    Raises:
        InvalidDocumentError: If the catalog is not a mapping with a
            ``strings`` mapping
    """
    if not isinstance(document, dict):
        raise InvalidDocumentError(
            f"String catalog must be a JSON object, got {type(document).__name__}"
        )
    strings = document.get("strings", {})
    if not isinstance(strings, dict):
        raise InvalidDocumentError("String catalog 'strings' must be a JSON object")

    units = []
    for key, entry in strings.items():
        if not isinstance(entry, dict):
            continue

        localizations = entry.get("localizations") or {}
        if not isinstance(localizations, dict):
            raise InvalidDocumentError(f"'localizations' of key {key!r} must be a JSON object")

        source_text = _string_value(localizations.get(source_locale)) or key
        if not source_text or not source_text.strip():
            continue

        missing = tuple(locale for locale in target_locales if not localizations.get(locale))
        if missing:
            units.append(
                TranslatableUnit(key=key, source_text=source_text, missing_locales=missing)
            )
    return units


def apply_results(
    document: Dict[str, Any],
    results: Sequence[BatchResult],
    source_locale: str,
) -> Tuple[int, int]:
    """Write accepted translations into ``document`` in place.

    Only locales in each result's ``accepted`` map are written; failed and
    rejected locales are left exactly as they were.

    Returns:
        Tuple of (units with at least one locale filled, locales filled)
    """
    strings = document["strings"]
    touched = 0
    filled = 0

    for result in results:
        if result.failed or not result.accepted:
            continue

        entry = strings[result.key]
        localizations = entry.get("localizations") or {}
        entry["localizations"] = localizations
        if not localizations.get(source_locale):
            localizations[source_locale] = _string_unit(result.source_text)

        for locale, text in result.accepted.items():
            if localizations.get(locale):
                continue
            localizations[locale] = _string_unit(text)
            filled += 1
        touched += 1

    return touched, filled


class TranslationPipeline:
    """Orchestrates catalog translation.

    Coordinates the flow:
    Catalog -> TranslatableUnits -> BatchScheduler -> BatchResults -> Catalog copy
    """

    def __init__(self, config: PipelineConfig, adapter: Optional[ProviderAdapter] = None):
        """Initialize translation pipeline.

        Args:
            config: Pipeline configuration
            adapter: Provider adapter override; resolved from the provider id if None

        Raises:
            ValueError: If the provider id is unknown or batching values are invalid
        """
        self.config = config
        self.batch_size, self.concurrency = resolve_batching(config.batch_size, config.concurrency)
        self.adapter = adapter or LLMProviderFactory.create(config.provider_config.provider)
        self._scheduler: Optional[BatchScheduler] = None
        self._should_stop = False

    def stop(self) -> None:
        """Stop dispatching new waves; the running wave still completes."""
        self._should_stop = True
        if self._scheduler is not None:
            self._scheduler.stop()

    async def translate(
        self,
        document: Dict[str, Any],
        progress: Optional[ProgressSink] = None,
    ) -> Dict[str, Any]:
        """Translate missing locales of ``document`` and return an updated copy.

        The caller's document is never mutated.

        Args:
            document: String catalog (``{"sourceLanguage", "strings": {...}}``)
            progress: Optional progress sink, called synchronously

        Returns:
            Deep copy of ``document`` with accepted translations added

        Raises:
            InvalidDocumentError: If the catalog cannot be read
        """
        data = copy.deepcopy(document)
        source_locale = self._source_locale(data)
        units = collect_units(data, self.config.target_locales, source_locale)

        if not units:
            emit(
                progress,
                ProgressEvent(
                    current=0,
                    total=0,
                    current_item_label="No translations needed",
                    log_message="All strings are already translated for selected languages",
                    log_severity=LogSeverity.INFO,
                ),
            )
            return data

        total = len(units)
        scheduler = BatchScheduler(
            adapter=self.adapter,
            provider_config=self.config.provider_config,
            protected_words=self.config.protected_words,
            batch_size=self.batch_size,
            concurrency=self.concurrency,
            wave_delay=self.config.wave_delay,
            progress=progress,
        )
        self._scheduler = scheduler
        if self._should_stop:
            scheduler.stop()

        emit(
            progress,
            ProgressEvent(
                current=0,
                total=total,
                current_item_label="Starting translations...",
                log_message=(
                    f"Translating {total} strings in "
                    f"{math.ceil(total / self.batch_size)} batches "
                    f"({self.batch_size} texts/batch, {self.concurrency} parallel)"
                ),
                log_severity=LogSeverity.INFO,
            ),
        )

        try:
            results = await scheduler.run(units)
        finally:
            self._scheduler = None

        touched, filled = apply_results(data, results, source_locale)
        failed = sum(1 for r in results if r.failed)
        logger.info(
            f"Translation finished: {touched}/{total} strings updated, "
            f"{filled} locales filled, {failed} failed"
        )

        emit(
            progress,
            ProgressEvent(
                current=total,
                total=total,
                current_item_label="Done",
                log_message=(
                    f"Finished: {touched} of {total} strings updated, "
                    f"{filled} translations added, {failed} failed"
                ),
                log_severity=LogSeverity.ERROR if failed == total else LogSeverity.INFO,
            ),
        )
        return data

    def _source_locale(self, document: Any) -> str:
        if self.config.source_locale:
            return self.config.source_locale
        if isinstance(document, dict) and isinstance(document.get("sourceLanguage"), str):
            return document["sourceLanguage"]
        return settings.source_locale


async def translate_single(
    text: str,
    target_locales: Sequence[str],
    provider_config: ProviderConfig,
    protected_words: Sequence[str] = (),
    adapter: Optional[ProviderAdapter] = None,
) -> Tuple[Dict[str, str], Optional[str]]:
    """Translate one text into several locales with a single request.

    Never raises for provider or parsing failures.

    Returns:
        Tuple of (locale -> translation, error message or None)
    """
    adapter = adapter or LLMProviderFactory.create(provider_config.provider)
    bundle = PromptEngine.build_single(text, target_locales, protected_words)
    try:
        raw = await adapter.send(bundle.system_prompt or "", bundle.user_prompt or "", provider_config)
        return OutputProcessor.parse_single(raw), None
    except (ProviderError, MalformedResponseError) as e:
        message = e.message if isinstance(e, ProviderError) else str(e)
        logger.warning(f"Single translation failed: {message}")
        return {}, message


async def translate_strings(
    document: Dict[str, Any],
    target_locales: Sequence[str],
    provider_config: ProviderConfig,
    protected_words: Sequence[str] = (),
    progress: Optional[ProgressSink] = None,
    batch_size: Optional[int] = None,
    concurrency: Optional[int] = None,
    adapter: Optional[ProviderAdapter] = None,
) -> Dict[str, Any]:
    """Convenience wrapper: build a pipeline and run it once."""
    pipeline = TranslationPipeline(
        PipelineConfig(
            provider_config=provider_config,
            target_locales=list(target_locales),
            protected_words=list(protected_words),
            batch_size=batch_size,
            concurrency=concurrency,
        ),
        adapter=adapter,
    )
    return await pipeline.translate(document, progress)


def _string_value(localization: Any) -> Optional[str]:
    if not isinstance(localization, dict):
        return None
    unit = localization.get("stringUnit")
    if not isinstance(unit, dict):
        return None
    value = unit.get("value")
    return value if isinstance(value, str) else None


def _string_unit(text: str) -> Dict[str, Any]:
    return {"stringUnit": {"state": StringUnitState.TRANSLATED.value, "value": text}}
