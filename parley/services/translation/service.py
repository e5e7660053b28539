"""Translation service backed by LibreTranslate."""

import asyncio
import logging
from datetime import datetime, timezone

from parley.core.errors import ServiceError
from parley.core.libretranslate import libretranslate_client
from parley.services.translation.models import (
    DetectedLanguage,
    SupportedLanguage,
    TranslationRequest,
    TranslationResponse,
)

logger = logging.getLogger(__name__)

# Returned when detection fails or yields nothing
FALLBACK_DETECTION = DetectedLanguage(language="en", confidence=0.5)

FALLBACK_LANGUAGES = [
    SupportedLanguage(code="en", name="English"),
    SupportedLanguage(code="es", name="Spanish"),
    SupportedLanguage(code="fr", name="French"),
    SupportedLanguage(code="de", name="German"),
    SupportedLanguage(code="it", name="Italian"),
    SupportedLanguage(code="pt", name="Portuguese"),
    SupportedLanguage(code="ru", name="Russian"),
    SupportedLanguage(code="ja", name="Japanese"),
    SupportedLanguage(code="ko", name="Korean"),
    SupportedLanguage(code="zh", name="Chinese"),
]


class TranslationError(ServiceError):
    """Raised when a translation cannot be produced."""

    pass


class TranslationService:
    """Service for translating conversation turns."""

    def __init__(self, client=None):
        self.client = client or libretranslate_client

    async def detect_language(self, text: str) -> DetectedLanguage:
        """
        Detect the language of a text.

        Never fails: provider errors fall back to English with 0.5 confidence.
        """
        try:
            detections = await self.client.detect(text)
        except Exception as e:
            logger.error(f"Language detection failed, assuming English: {e}")
            return FALLBACK_DETECTION

        if not detections:
            logger.warning("No language detected, assuming English")
            return FALLBACK_DETECTION

        best = detections[0]
        return DetectedLanguage(language=best.language, confidence=best.confidence)

    async def translate(self, request: TranslationRequest) -> TranslationResponse:
        """
        Translate a text, detecting its language when not given.

        Args:
            request: Text, target language and optional source language

        Returns:
            Original and translated text with the source language used

        Raises:
            TranslationError: If the provider call fails
        """
        text = request.text
        target = request.target_language

        if request.source_language:
            source = request.source_language
            confidence = 1.0
        else:
            detection = await self.detect_language(text)
            source = detection.language
            confidence = detection.confidence

        if source == target:
            translated = text
        else:
            try:
                result = await self.client.translate(text, source=source, target=target)
            except Exception as e:
                logger.exception(f"Translation {source} -> {target} failed: {e}")
                raise TranslationError(f"Failed to translate text: {e}") from e
            translated = result.translated_text

        return TranslationResponse(
            original_text=text,
            translated_text=translated,
            detected_language=source,
            confidence=confidence,
            timestamp=datetime.now(timezone.utc),
        )

    async def get_supported_languages(self) -> list[SupportedLanguage]:
        """List supported languages, or a built-in list if the provider is down."""
        try:
            languages = await self.client.languages()
        except Exception as e:
            logger.error(f"Failed to fetch supported languages, using fallback: {e}")
            return list(FALLBACK_LANGUAGES)

        return [SupportedLanguage(code=lang.code, name=lang.name) for lang in languages]

    async def batch_translate(
        self, texts: list[str], target_language: str = "en"
    ) -> list[TranslationResponse]:
        """
        Translate several texts concurrently.

        The first failure cancels the translations still in flight.

        Raises:
            TranslationError: If any single translation fails
        """
        tasks = [
            asyncio.ensure_future(
                self.translate(TranslationRequest(text=text, target_language=target_language))
            )
            for text in texts
        ]
        try:
            return list(await asyncio.gather(*tasks))
        except TranslationError as e:
            raise TranslationError(f"Failed to batch translate: {e}") from e
        finally:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                logger.warning(f"Cancelled {len(pending)} pending batch translations")
                await asyncio.gather(*pending, return_exceptions=True)


# Singleton instance
translation_service = TranslationService()
