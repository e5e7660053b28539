"""Conversation summarization service."""

import logging
import re
from datetime import datetime, timezone
from typing import Sequence

from parley.core.config import settings
from parley.llm import SummaryModel, gemini_client, openai_client
from parley.services.summarization.exceptions import SummarizationError
from parley.services.summarization.extractive import (
    MAX_KEY_POINTS,
    ROLE_LABELS,
    calculate_duration,
    count_participants,
    extract_languages,
    summarize_conversation,
)
from parley.services.summarization.models import (
    ConversationMessage,
    SummarizationRequest,
    SummarizationResponse,
    SummaryFormat,
)

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = ("extractive", "llm")
SUPPORTED_PROVIDERS = ("gemini", "openai")

BULLET_PATTERN = re.compile(r"^[-•*]\s+")
NUMBERED_PATTERN = re.compile(r"^\d+\.\s+")
SENTENCE_SPLIT = re.compile(r"[.!?]+")


def format_conversation(messages: Sequence[ConversationMessage]) -> str:
    """Render turns as a transcript with their translations for the prompt."""
    blocks = []
    for msg in messages:
        role = ROLE_LABELS[msg.speaker]
        lang = f" [{msg.detected_language}]" if msg.detected_language != "en" else ""
        blocks.append(
            f"{role}{lang}: {msg.original_text}\nTranslation: {msg.translated_text}"
        )
    return "\n\n".join(blocks)


def build_prompt(conversation_text: str, format: SummaryFormat) -> str:
    """Build the summarization prompt for the requested format."""
    prompt = f"Please summarize the following conversation:\n\n{conversation_text}"

    if format == "brief":
        return (
            f"{prompt}\n\nProvide a brief summary in 2-3 sentences highlighting "
            "the main topic and outcome."
        )

    return f"""{prompt}

Provide a detailed summary including:
1. Main topics discussed
2. Key points and decisions
3. Action items (if any)
4. Overall tone and context"""


def extract_key_points_from_text(summary: str) -> list[str]:
    """
    Pull key points out of a generated summary.

    List items (bullets or numbered) win; otherwise the first sentences
    longer than 20 characters are used.
    """
    lines = [line.strip() for line in summary.split("\n") if line.strip()]

    key_points = [
        NUMBERED_PATTERN.sub("", BULLET_PATTERN.sub("", line)).strip()
        for line in lines
        if BULLET_PATTERN.match(line) or NUMBERED_PATTERN.match(line)
    ]

    if not key_points:
        sentences = [s.strip() for s in SENTENCE_SPLIT.split(summary)]
        key_points = [s for s in sentences if len(s) > 20]

    return key_points[:MAX_KEY_POINTS]


def get_summary_model() -> SummaryModel:
    """
    Pick the language model named by LLM_PROVIDER.

    Raises:
        ValueError: If the provider is unknown or its API key is missing
    """
    provider = settings.llm_provider.lower()

    if provider == "gemini":
        if not settings.gemini_api_key:
            raise ValueError("GEMINI_API_KEY is required when LLM_PROVIDER=gemini")
        return gemini_client

    if provider == "openai":
        if not settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required when LLM_PROVIDER=openai")
        return openai_client

    raise ValueError(
        f"Unsupported LLM_PROVIDER: {provider}. "
        f"Supported: {', '.join(SUPPORTED_PROVIDERS)}"
    )


class SummarizationService:
    """Summarizes conversations with the configured backend."""

    async def summarize_conversation(
        self, request: SummarizationRequest
    ) -> SummarizationResponse:
        """
        Summarize a conversation.

        Args:
            request: Turns plus the desired summary format

        Returns:
            Summary, key points and metadata

        Raises:
            SummarizationError: If the backend fails
            ValueError: If SUMMARIZER_BACKEND is not supported
        """
        backend = settings.summarizer_backend.lower()

        if backend == "extractive":
            return summarize_conversation(request.messages, request.format)

        if backend == "llm":
            try:
                return await self._summarize_with_llm(request)
            except Exception as e:
                logger.exception(f"LLM summarization failed: {e}")
                raise SummarizationError(f"Failed to summarize conversation: {e}") from e

        raise ValueError(
            f"Unsupported SUMMARIZER_BACKEND: {backend}. "
            f"Supported: {', '.join(SUPPORTED_BACKENDS)}"
        )

    async def _summarize_with_llm(
        self, request: SummarizationRequest
    ) -> SummarizationResponse:
        """Summarize with the configured language model."""
        messages = request.messages

        prompt = build_prompt(format_conversation(messages), request.format)

        model = get_summary_model()
        summary = await model.summarize(prompt, request.format)
        logger.info(
            f"Generated {request.format} summary with {settings.llm_provider} "
            f"for {len(messages)} messages: {len(summary)} characters"
        )

        return SummarizationResponse(
            summary=summary,
            key_points=extract_key_points_from_text(summary),
            participant_count=count_participants(messages),
            duration=calculate_duration(messages),
            languages_detected=extract_languages(messages),
            timestamp=datetime.now(timezone.utc),
        )


# Singleton instance
summarization_service = SummarizationService()
