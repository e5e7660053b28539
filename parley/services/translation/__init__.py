"""Translation service module."""

from parley.services.translation.router import router
from parley.services.translation.service import translation_service

__all__ = ["router", "translation_service"]
