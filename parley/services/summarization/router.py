"""FastAPI router for conversation summarization endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from parley.core.config import settings
from parley.services.health import ServiceHealth
from parley.services.summarization.models import (
    SummarizationRequest,
    SummarizationResponse,
)
from parley.services.summarization.service import summarization_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["summarization"])


@router.post("/summarize", response_model=SummarizationResponse)
async def summarize_conversation(request: SummarizationRequest) -> SummarizationResponse:
    """Summarize a recorded conversation."""
    if not request.messages:
        raise HTTPException(
            status_code=400,
            detail="Messages array is required for summarization",
        )

    if len(request.messages) > settings.max_summarization_messages:
        raise HTTPException(
            status_code=400,
            detail=(
                f"Maximum {settings.max_summarization_messages} messages "
                "allowed per summarization request"
            ),
        )

    logger.info(f"Summarizing {len(request.messages)} messages ({request.format})")
    return await summarization_service.summarize_conversation(request)


@router.get("/summarize/health", response_model=ServiceHealth)
async def health_check() -> ServiceHealth:
    """Health check for the summarization service."""
    return ServiceHealth(
        status="healthy",
        service="summarization",
        timestamp=datetime.now(timezone.utc),
    )
