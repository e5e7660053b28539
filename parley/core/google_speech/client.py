"""Google Cloud Speech-to-Text client wrapper."""

import logging
from typing import AsyncIterable, AsyncIterator, Optional

from google.cloud import speech

from parley.core.config import settings

logger = logging.getLogger(__name__)

# Languages the recognizer may pick instead of the requested hint
ALTERNATIVE_LANGUAGE_CODES = [
    "es-ES", "fr-FR", "de-DE", "it-IT", "pt-BR",
    "ru-RU", "ja-JP", "ko-KR", "zh-CN", "ar-SA",
]


class GoogleSpeechClient:
    """Thin async wrapper around the Cloud Speech v1 API."""

    def __init__(self, credentials_file: Optional[str] = None):
        self.credentials_file = credentials_file or settings.google_application_credentials
        self._client: Optional[speech.SpeechAsyncClient] = None

    @property
    def client(self) -> speech.SpeechAsyncClient:
        """Lazy initialization of the Speech client."""
        if self._client is None:
            if self.credentials_file:
                self._client = speech.SpeechAsyncClient.from_service_account_file(
                    self.credentials_file
                )
            else:
                self._client = speech.SpeechAsyncClient()
            logger.info("Google Speech client initialized")
        return self._client

    @staticmethod
    def build_config(
        encoding: str = "LINEAR16",
        sample_rate_hertz: int = 16000,
        language_code: str = "en-US",
        enhanced: bool = True,
    ) -> speech.RecognitionConfig:
        """
        Build a recognition config with multilingual detection enabled.

        Raises:
            ValueError: If the encoding name is not a known AudioEncoding
        """
        try:
            audio_encoding = speech.RecognitionConfig.AudioEncoding[encoding]
        except KeyError:
            raise ValueError(f"Unsupported audio encoding: {encoding}") from None

        return speech.RecognitionConfig(
            encoding=audio_encoding,
            sample_rate_hertz=sample_rate_hertz,
            language_code=language_code,
            enable_automatic_punctuation=True,
            model="default",
            use_enhanced=enhanced,
            alternative_language_codes=ALTERNATIVE_LANGUAGE_CODES,
        )

    async def recognize(
        self, content: bytes, config: speech.RecognitionConfig
    ) -> speech.RecognizeResponse:
        """Run synchronous (non-streaming) recognition on an audio payload."""
        audio = speech.RecognitionAudio(content=content)
        response = await self.client.recognize(config=config, audio=audio)
        logger.debug(f"Recognized {len(response.results)} result(s) from {len(content)} bytes")
        return response

    async def streaming_recognize(
        self,
        chunks: AsyncIterable[bytes],
        config: speech.RecognitionConfig,
    ) -> AsyncIterator[speech.StreamingRecognizeResponse]:
        """
        Stream audio chunks to the recognizer and yield its responses.

        The first request carries the streaming config; every following
        request carries one audio chunk.
        """
        streaming_config = speech.StreamingRecognitionConfig(
            config=config,
            interim_results=True,
        )

        async def requests() -> AsyncIterator[speech.StreamingRecognizeRequest]:
            yield speech.StreamingRecognizeRequest(streaming_config=streaming_config)
            async for chunk in chunks:
                yield speech.StreamingRecognizeRequest(audio_content=chunk)

        responses = await self.client.streaming_recognize(requests=requests())
        async for response in responses:
            yield response


# Singleton instance for dependency injection
google_speech_client = GoogleSpeechClient()
