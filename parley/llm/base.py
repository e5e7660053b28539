"""Summary-generation contract shared by the LLM clients.

A client takes a summarization prompt and the requested summary format and
returns finished summary text. The format decides the completion budget,
and a blank completion comes back as ``EMPTY_SUMMARY`` so the summarizer
always has text to extract key points from.
"""

import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are a helpful assistant that summarizes conversations clearly and "
    "concisely. Extract the most important information and key points."
)

TEMPERATURE = 0.3

# Completion token caps per summary format
MAX_OUTPUT_TOKENS = {
    "brief": 500,
    "detailed": 1500,
}

EMPTY_SUMMARY = "Unable to generate summary"


class SummaryModel(Protocol):
    """A language model that writes conversation summaries."""

    async def summarize(self, prompt: str, format: str = "brief") -> str:
        """Return summary text for the prompt, never empty."""
        ...


def output_budget(format: str) -> int:
    """Completion token cap for a summary format."""
    try:
        return MAX_OUTPUT_TOKENS[format]
    except KeyError:
        raise ValueError(f"Unsupported summary format: {format}") from None


def finish_summary(completion: Optional[str], provider: str) -> str:
    """Trim a completion, falling back to the placeholder when it is blank."""
    summary = (completion or "").strip()
    if not summary:
        logger.warning(f"{provider} returned an empty summary")
        return EMPTY_SUMMARY
    return summary
