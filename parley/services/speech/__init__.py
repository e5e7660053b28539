"""Speech-to-text service module."""

from parley.services.speech.router import router
from parley.services.speech.service import speech_service

__all__ = ["router", "speech_service"]
