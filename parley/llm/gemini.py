"""Conversation summaries from Google Gemini, retried when rate limited."""

import logging
from typing import Optional

from google import genai
from google.genai import types
from google.genai.errors import ClientError
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from parley.core.config import settings
from parley.llm.base import (
    SYSTEM_INSTRUCTION,
    TEMPERATURE,
    finish_summary,
    output_budget,
)

logger = logging.getLogger(__name__)


def is_rate_limit_error(error: BaseException) -> bool:
    """Check whether a Gemini error is an HTTP 429 / quota rejection."""
    if not isinstance(error, ClientError):
        return False
    return "429" in str(error) or "quota" in str(error).lower()


def _log_retry(retry_state) -> None:
    logger.warning(
        f"Gemini rate limited, retrying (attempt {retry_state.attempt_number})"
    )


class GeminiClient:
    """Writes conversation summaries with a Gemini model."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key or settings.gemini_api_key
        self.model = model or settings.gemini_model
        self._client: Optional[genai.Client] = None

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise ValueError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception(is_rate_limit_error),
        before_sleep=_log_retry,
        reraise=True,
    )
    async def summarize(self, prompt: str, format: str = "brief") -> str:
        """
        Summarize a formatted conversation.

        Args:
            prompt: Summarization prompt with the transcript
            format: "brief" or "detailed", sets the completion budget

        Returns:
            Summary text, or the placeholder if the model wrote nothing

        Raises:
            ClientError: If the request fails or stays rate limited
        """
        config = types.GenerateContentConfig(
            system_instruction=SYSTEM_INSTRUCTION,
            temperature=TEMPERATURE,
            max_output_tokens=output_budget(format),
        )

        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=config,
        )

        summary = finish_summary(response.text, "Gemini")
        logger.debug(f"Gemini {format} summary ({self.model}): {len(summary)} characters")
        return summary


gemini_client = GeminiClient()
