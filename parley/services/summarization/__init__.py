"""Conversation summarization service module."""

from parley.services.summarization.router import router
from parley.services.summarization.service import summarization_service

__all__ = ["router", "summarization_service"]
