"""Translation API routes."""

import logging

from fastapi import APIRouter, HTTPException

from locsync.core.errors import InvalidDocumentError, ProviderError
from locsync.core.llm.service import llm_service
from locsync.core.translation.models.progress import ProgressEvent
from locsync.core.translation.pipeline import PipelineConfig, TranslationPipeline
from locsync.models.schemas.llm import (
    TranslateStringsRequest,
    TranslateStringsResponse,
    TranslateTextRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/translation/strings")
async def translate_strings(request: TranslateStringsRequest) -> TranslateStringsResponse:
    """Fill the missing target locales of a string catalog.

    Provider and parsing failures do not fail the request; they show up as
    ``error`` events and the affected locales stay untranslated.
    """
    provider_config = request.to_provider_config()
    try:
        pipeline = TranslationPipeline(
            PipelineConfig(
                provider_config=provider_config,
                target_locales=request.target_locales,
                protected_words=request.protected_words,
                batch_size=request.batch_size,
                concurrency=request.concurrency,
            )
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        f"[Translation API] Starting translation: {provider_config.describe()}, "
        f"locales={request.target_locales}"
    )

    events: list[ProgressEvent] = []
    try:
        document = await pipeline.translate(request.document, progress=events.append)
    except InvalidDocumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return TranslateStringsResponse(document=document, events=events)


@router.post("/translation/text")
async def translate_text(request: TranslateTextRequest):
    """Run a free-form completion and return the cleaned text."""
    try:
        text = await llm_service.complete_text(request.prompt, request.to_provider_config())
    except ProviderError as e:
        raise HTTPException(status_code=502, detail=e.message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"text": text}
