"""Conversation summaries from OpenAI chat models."""

import logging
from typing import Optional

from openai import AsyncOpenAI

from parley.core.config import settings
from parley.llm.base import (
    SYSTEM_INSTRUCTION,
    TEMPERATURE,
    finish_summary,
    output_budget,
)

logger = logging.getLogger(__name__)


class OpenAIClient:
    """Writes conversation summaries with an OpenAI chat model."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.openai_model
        self._client: Optional[AsyncOpenAI] = None

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise ValueError("OPENAI_API_KEY is not configured")
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def summarize(self, prompt: str, format: str = "brief") -> str:
        """
        Summarize a formatted conversation.

        Args:
            prompt: Summarization prompt with the transcript
            format: "brief" or "detailed", sets the completion budget

        Returns:
            Summary text, or the placeholder if the model wrote nothing
        """
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_INSTRUCTION},
                {"role": "user", "content": prompt},
            ],
            temperature=TEMPERATURE,
            max_tokens=output_budget(format),
        )

        # A filtered or truncated request can come back without choices
        content = response.choices[0].message.content if response.choices else None
        summary = finish_summary(content, "OpenAI")
        logger.debug(f"OpenAI {format} summary ({self.model}): {len(summary)} characters")
        return summary


openai_client = OpenAIClient()
