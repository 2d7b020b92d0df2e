"""Batch scheduler for catalog translation.

Units are grouped into batches of ``batch_size`` and batches into waves of
``concurrency``. Each wave's provider calls run concurrently; the next wave
starts only after every batch of the current one has resolved, with a fixed
pause in between. A failing batch marks its own units as failed and nothing
else. Results are reduced in original unit order so progress counts are
deterministic regardless of network completion order.
"""

import asyncio
import logging
from typing import List, Optional, Sequence, Tuple

from locsync.config import resolve_batching, settings
from locsync.core.errors import PlaceholderViolation, ProviderError
from locsync.core.llm.adapter import ProviderAdapter
from locsync.core.llm.runtime_config import ProviderConfig
from locsync.utils.text import truncate_label
from ..models.progress import LogSeverity, ProgressEvent, ProgressSink, emit
from ..models.result import BatchResult
from ..models.unit import Batch, BatchItem, TranslatableUnit
from .output_processor import OutputProcessor
from .placeholders import placeholders_match, scan
from .prompt_engine import PromptEngine

logger = logging.getLogger(__name__)

CANCELLED_MESSAGE = "Translation cancelled before this batch was sent"
NO_RESULT_MESSAGE = "No translations returned for this item"

ItemResult = Tuple[BatchItem, BatchResult]


class BatchScheduler:
    """Runs translation batches in bounded, paced waves.

    The scheduler holds no state across runs except the stop flag, which a
    host may set at any time; it is honoured at the next wave boundary.
    """

    def __init__(
        self,
        adapter: ProviderAdapter,
        provider_config: ProviderConfig,
        protected_words: Sequence[str] = (),
        batch_size: Optional[int] = None,
        concurrency: Optional[int] = None,
        wave_delay: Optional[float] = None,
        progress: Optional[ProgressSink] = None,
    ):
        """Initialize the scheduler.

        Args:
            adapter: Provider adapter used for every batch
            provider_config: Passed through unchanged to the adapter
            protected_words: Terms the provider must echo verbatim
            batch_size: Units per provider call (settings default if None)
            concurrency: Batches in flight per wave (settings default if None)
            wave_delay: Seconds to pause between waves (settings default if None)
            progress: Optional progress sink
        """
        self.adapter = adapter
        self.provider_config = provider_config
        self.protected_words = list(protected_words)
        self.batch_size, self.concurrency = resolve_batching(batch_size, concurrency)
        self.wave_delay = settings.wave_delay_seconds if wave_delay is None else wave_delay
        self.progress = progress
        self._should_stop = False

    def stop(self) -> None:
        """Ask the scheduler not to dispatch any further waves."""
        self._should_stop = True

    def build_batches(self, units: Sequence[TranslatableUnit]) -> List[Batch]:
        """Split units into consecutive batches, capturing placeholders."""
        batches = []
        for start in range(0, len(units), self.batch_size):
            chunk = units[start:start + self.batch_size]
            batches.append(
                Batch(
                    index=len(batches),
                    items=tuple(
                        BatchItem(unit=unit, placeholders=tuple(scan(unit.source_text)))
                        for unit in chunk
                    ),
                )
            )
        return batches

    def build_waves(self, batches: Sequence[Batch]) -> List[List[Batch]]:
        """Split batches into waves of at most ``concurrency``."""
        return [
            list(batches[start:start + self.concurrency])
            for start in range(0, len(batches), self.concurrency)
        ]

    async def run(self, units: Sequence[TranslatableUnit]) -> List[BatchResult]:
        """Translate every unit and return one result per unit, in input order."""
        total = len(units)
        batches = self.build_batches(units)
        waves = self.build_waves(batches)
        logger.info(
            f"Translating {total} strings in {len(batches)} batches "
            f"({self.batch_size} texts/batch, {self.concurrency} parallel, {len(waves)} waves)"
        )

        results: List[BatchResult] = []
        current = 0

        for wave_index, wave in enumerate(waves):
            if self._should_stop:
                skipped = [batch for pending in waves[wave_index:] for batch in pending]
                logger.info(f"Stop requested, skipping {len(skipped)} batches")
                wave_items = [
                    (item, self._failed(item, CANCELLED_MESSAGE))
                    for batch in skipped
                    for item in batch.items
                ]
                current = self._reduce(wave_items, current, total, results)
                break

            batch_outputs = await asyncio.gather(*(self._run_batch(batch) for batch in wave))
            wave_items = [pair for output in batch_outputs for pair in output]
            current = self._reduce(wave_items, current, total, results)

            if wave_index < len(waves) - 1:
                await self._pause()

        return results

    async def _run_batch(self, batch: Batch) -> List[ItemResult]:
        """Prompt, send and parse one batch; errors stay inside the batch."""
        locales = _batch_locales(batch)
        bundle = PromptEngine.build_batch(batch.units, locales, self.protected_words)

        try:
            raw = await self.adapter.send(
                bundle.system_prompt or "",
                bundle.user_prompt or "",
                self.provider_config,
            )
            parsed = OutputProcessor.parse_batch(raw, len(batch))
        except Exception as e:
            message = e.message if isinstance(e, ProviderError) else str(e) or type(e).__name__
            logger.warning(f"Batch {batch.index} failed ({type(e).__name__}): {message}")
            return [(item, self._failed(item, message)) for item in batch.items]

        return [
            (
                item,
                BatchResult(
                    key=item.unit.key,
                    source_text=item.unit.source_text,
                    missing_locales=item.unit.missing_locales,
                    translations=parsed.get(position, {}),
                ),
            )
            for position, item in enumerate(batch.items)
        ]

    def _reduce(
        self,
        items: List[ItemResult],
        current: int,
        total: int,
        results: List[BatchResult],
    ) -> int:
        """Validate results in order, emit progress and collect them."""
        for item, raw_result in items:
            result = self.validate(item, raw_result)
            results.append(result)
            current += 1
            label = truncate_label(result.source_text)

            if result.error:
                self._emit(
                    current, total, label,
                    f'Error translating "{label}": {result.error}',
                    LogSeverity.ERROR,
                )
                continue

            for locale, reason in result.rejected.items():
                self._emit(
                    current, total, label,
                    f'Rejected {locale} translation of "{label}": {reason}',
                    LogSeverity.ERROR,
                )

            filled = result.filled_count
            self._emit(
                current, total, label,
                f'Translated "{label}" to {filled} of {len(result.missing_locales)} languages',
                LogSeverity.SUCCESS if filled else LogSeverity.ERROR,
            )
        return current

    @staticmethod
    def validate(item: BatchItem, result: BatchResult) -> BatchResult:
        """Accept or reject each missing locale of a successful result.

        Empty translations are dropped; translations whose specifier sequence
        differs from the source are rejected for that locale only. A result
        with no translations at all is an item-level error.
        """
        if result.error:
            return result
        if not result.translations:
            return result.model_copy(update={"error": NO_RESULT_MESSAGE})

        accepted = {}
        rejected = {}
        for locale in result.missing_locales:
            text = result.translations.get(locale)
            if not text or not text.strip():
                continue
            if not placeholders_match(item.placeholders, text):
                rejected[locale] = str(
                    PlaceholderViolation(locale, item.placeholders, scan(text))
                )
                continue
            accepted[locale] = text

        return result.model_copy(update={"accepted": accepted, "rejected": rejected})

    async def _pause(self) -> None:
        await asyncio.sleep(self.wave_delay)

    @staticmethod
    def _failed(item: BatchItem, message: str) -> BatchResult:
        return BatchResult(
            key=item.unit.key,
            source_text=item.unit.source_text,
            missing_locales=item.unit.missing_locales,
            error=message,
        )

    def _emit(
        self,
        current: int,
        total: int,
        label: str,
        message: str,
        severity: LogSeverity,
    ) -> None:
        emit(
            self.progress,
            ProgressEvent(
                current=current,
                total=total,
                current_item_label=label,
                log_message=message,
                log_severity=severity,
            ),
        )


def _batch_locales(batch: Batch) -> List[str]:
    """Union of the batch's missing locales, in first-seen order."""
    locales: List[str] = []
    for unit in batch.units:
        for locale in unit.missing_locales:
            if locale not in locales:
                locales.append(locale)
    return locales
