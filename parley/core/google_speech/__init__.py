"""Google Cloud Speech integration."""

from parley.core.google_speech.client import (
    ALTERNATIVE_LANGUAGE_CODES,
    GoogleSpeechClient,
    google_speech_client,
)

__all__ = ["ALTERNATIVE_LANGUAGE_CODES", "GoogleSpeechClient", "google_speech_client"]
