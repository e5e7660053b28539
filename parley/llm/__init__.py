"""Language models behind the ``llm`` summarizer backend."""

from parley.llm.base import EMPTY_SUMMARY, SummaryModel
from parley.llm.gemini import GeminiClient, gemini_client
from parley.llm.openai import OpenAIClient, openai_client

__all__ = [
    "EMPTY_SUMMARY",
    "SummaryModel",
    "GeminiClient",
    "gemini_client",
    "OpenAIClient",
    "openai_client",
]
