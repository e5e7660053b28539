"""Speech-to-text service backed by Google Cloud Speech."""

import base64
import binascii
import logging
from datetime import datetime, timezone
from typing import AsyncIterable, AsyncIterator

from parley.core.errors import ServiceError
from parley.core.google_speech import google_speech_client
from parley.services.speech.models import SpeechToTextRequest, SpeechToTextResponse

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en-US"


class SpeechError(ServiceError):
    """Raised when audio cannot be transcribed."""

    pass


def decode_audio(audio_data: str) -> bytes:
    """Decode base64 audio, rejecting anything that is not valid base64."""
    try:
        return base64.b64decode(audio_data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Audio data is not valid base64: {e}") from e


class SpeechService:
    """Service for transcribing recorded speech."""

    def __init__(self, client=None):
        self.client = client or google_speech_client

    async def speech_to_text(self, request: SpeechToTextRequest) -> SpeechToTextResponse:
        """
        Transcribe an audio clip.

        Args:
            request: Base64 audio with encoding, sample rate and language hint

        Returns:
            Transcript, confidence and the language the recognizer settled on

        Raises:
            SpeechError: If the audio is invalid or recognition fails
        """
        try:
            content = decode_audio(request.audio_data)
            config = self.client.build_config(
                encoding=request.encoding,
                sample_rate_hertz=request.sample_rate_hertz,
                language_code=request.language_code,
            )
            response = await self.client.recognize(content, config)
        except Exception as e:
            logger.exception(f"Speech-to-text failed: {e}")
            raise SpeechError(f"Failed to convert speech to text: {e}") from e

        results = list(response.results)

        transcript = " ".join(
            result.alternatives[0].transcript for result in results if result.alternatives
        )

        confidence = 0.0
        detected_language = request.language_code
        if results:
            first = results[0]
            if first.alternatives:
                confidence = first.alternatives[0].confidence or 0.0
            detected_language = first.language_code or request.language_code

        logger.info(
            f"Transcribed {len(transcript)} characters "
            f"(language: {detected_language}, confidence: {confidence:.2f})"
        )

        return SpeechToTextResponse(
            transcript=transcript,
            confidence=confidence,
            detected_language=detected_language,
            timestamp=datetime.now(timezone.utc),
        )

    async def detect_audio_language(self, audio_data: str) -> str:
        """
        Detect the spoken language of an audio clip.

        Never fails: any error falls back to en-US.
        """
        try:
            content = decode_audio(audio_data)
            config = self.client.build_config(enhanced=False)
            response = await self.client.recognize(content, config)
        except Exception as e:
            logger.error(f"Audio language detection failed, assuming {DEFAULT_LANGUAGE}: {e}")
            return DEFAULT_LANGUAGE

        if response.results and response.results[0].language_code:
            return response.results[0].language_code
        return DEFAULT_LANGUAGE

    async def stream_transcripts(
        self,
        chunks: AsyncIterable[bytes],
        language_code: str = DEFAULT_LANGUAGE,
    ) -> AsyncIterator[tuple[str, bool]]:
        """
        Transcribe a live LINEAR16 16 kHz audio stream.

        Yields:
            (transcript, is_final) for every interim and final result
        """
        config = self.client.build_config(language_code=language_code, enhanced=False)

        async for response in self.client.streaming_recognize(chunks, config):
            if not response.results:
                continue
            result = response.results[0]
            if result.alternatives:
                yield result.alternatives[0].transcript or "", result.is_final


# Singleton instance
speech_service = SpeechService()
