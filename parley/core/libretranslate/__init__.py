"""LibreTranslate integration."""

from parley.core.libretranslate.client import (
    LibreTranslateClient,
    LibreTranslateError,
    libretranslate_client,
)

__all__ = ["LibreTranslateClient", "LibreTranslateError", "libretranslate_client"]
