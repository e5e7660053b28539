"""FastAPI router for translation endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from parley.core.config import settings
from parley.services.translation.models import (
    BatchTranslationRequest,
    BatchTranslationResponse,
    DetectLanguageRequest,
    DetectLanguageResponse,
    SupportedLanguagesResponse,
    TranslationRequest,
    TranslationResponse,
)
from parley.services.translation.service import translation_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["translation"])


@router.post("/translate", response_model=TranslationResponse)
async def translate(request: TranslationRequest) -> TranslationResponse:
    """Translate text, auto-detecting the source language if omitted."""
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Text is required for translation")

    return await translation_service.translate(request)


@router.post("/detect-language", response_model=DetectLanguageResponse)
async def detect_language(request: DetectLanguageRequest) -> DetectLanguageResponse:
    """Detect the language of a text."""
    if not request.text.strip():
        raise HTTPException(
            status_code=400, detail="Text is required for language detection"
        )

    detection = await translation_service.detect_language(request.text)
    return DetectLanguageResponse(
        language=detection.language,
        confidence=detection.confidence,
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/supported-languages", response_model=SupportedLanguagesResponse)
async def get_supported_languages() -> SupportedLanguagesResponse:
    """List languages available for translation."""
    languages = await translation_service.get_supported_languages()
    return SupportedLanguagesResponse(
        languages=languages,
        count=len(languages),
        timestamp=datetime.now(timezone.utc),
    )


@router.post("/batch-translate", response_model=BatchTranslationResponse)
async def batch_translate(request: BatchTranslationRequest) -> BatchTranslationResponse:
    """Translate many texts to the same target language."""
    if not request.texts:
        raise HTTPException(
            status_code=400,
            detail="An array of texts is required for batch translation",
        )

    if len(request.texts) > settings.max_batch_texts:
        raise HTTPException(
            status_code=400,
            detail=f"Maximum {settings.max_batch_texts} texts allowed per batch request",
        )

    results = await translation_service.batch_translate(
        request.texts, request.target_language
    )
    logger.info(f"Batch translated {len(results)} texts to {request.target_language}")

    return BatchTranslationResponse(
        results=results,
        count=len(results),
        timestamp=datetime.now(timezone.utc),
    )
