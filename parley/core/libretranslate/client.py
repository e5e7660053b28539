"""LibreTranslate HTTP client for text translation and language detection."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from parley.core.config import settings
from parley.core.libretranslate.models import Detection, Language, TranslateResult

logger = logging.getLogger(__name__)


class LibreTranslateError(Exception):
    """Exception raised when a LibreTranslate API call fails."""

    pass


class LibreTranslateClient:
    """HTTP client for a LibreTranslate-compatible service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.libretranslate_url
        self.api_key = api_key if api_key is not None else settings.libretranslate_api_key
        self.timeout = timeout or settings.libretranslate_timeout
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        """Create an async HTTP client for the configured instance."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    def _payload(self, **fields: str) -> dict:
        """Build a request body, adding the API key when one is configured."""
        payload = dict(fields)
        if self.api_key:
            payload["api_key"] = self.api_key
        return payload

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((httpx.HTTPStatusError, httpx.ConnectError)),
    )
    async def detect(self, text: str) -> list[Detection]:
        """
        Detect the language of a text.

        Args:
            text: Text to analyse

        Returns:
            Detection candidates, most likely first

        Raises:
            LibreTranslateError: If the response is not a detection list
        """
        async with self._get_client() as client:
            response = await client.post("/detect", json=self._payload(q=text))
            response.raise_for_status()
            data = response.json()

        if not isinstance(data, list):
            raise LibreTranslateError(f"Unexpected detect response: {data}")

        try:
            return [Detection.model_validate(item) for item in data]
        except ValidationError as e:
            raise LibreTranslateError(f"Invalid detect response: {e}") from e

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((httpx.HTTPStatusError, httpx.ConnectError)),
    )
    async def translate(self, text: str, source: str, target: str) -> TranslateResult:
        """
        Translate text between two languages.

        Args:
            text: Text to translate
            source: Source language code (or "auto")
            target: Target language code

        Returns:
            Translation result

        Raises:
            LibreTranslateError: If the response carries no translation
        """
        payload = self._payload(q=text, source=source, target=target, format="text")

        async with self._get_client() as client:
            response = await client.post("/translate", json=payload)
            response.raise_for_status()
            data = response.json()

        try:
            result = TranslateResult.model_validate(data)
        except ValidationError as e:
            raise LibreTranslateError(f"Invalid translate response: {data}") from e

        logger.debug(f"Translated {len(text)} characters {source} -> {target}")
        return result

    @retry(
        stop=stop_after_attempt(2),
        wait=wait_exponential(multiplier=1, min=1, max=5),
        retry=retry_if_exception_type((httpx.HTTPStatusError, httpx.ConnectError)),
    )
    async def languages(self) -> list[Language]:
        """
        Get languages supported by the instance.

        Returns:
            List of supported languages
        """
        async with self._get_client() as client:
            response = await client.get("/languages")
            response.raise_for_status()
            data = response.json()

        try:
            languages = [Language.model_validate(item) for item in data]
        except (TypeError, ValidationError) as e:
            raise LibreTranslateError(f"Invalid languages response: {e}") from e

        logger.info(f"Fetched {len(languages)} supported languages")
        return languages


# Singleton instance for dependency injection
libretranslate_client = LibreTranslateClient()
