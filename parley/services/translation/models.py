"""Pydantic models for the translation service."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TranslationRequest(BaseModel):
    """Request model for translating a single text."""

    text: str = ""
    target_language: str = Field(default="en", alias="targetLanguage")
    source_language: Optional[str] = Field(default=None, alias="sourceLanguage")

    model_config = {"populate_by_name": True}


class TranslationResponse(BaseModel):
    """Response model for a translation."""

    original_text: str = Field(alias="originalText")
    translated_text: str = Field(alias="translatedText")
    detected_language: str = Field(alias="detectedLanguage")
    confidence: float
    timestamp: datetime

    model_config = {"populate_by_name": True}


class DetectLanguageRequest(BaseModel):
    """Request model for text language detection."""

    text: str = ""


class DetectedLanguage(BaseModel):
    """Detected language with the provider's confidence."""

    language: str
    confidence: float


class DetectLanguageResponse(DetectedLanguage):
    """Response model for text language detection."""

    timestamp: datetime


class SupportedLanguage(BaseModel):
    """A language the translation provider supports."""

    code: str
    name: str


class SupportedLanguagesResponse(BaseModel):
    """Response model for the supported languages listing."""

    languages: list[SupportedLanguage]
    count: int
    timestamp: datetime


class BatchTranslationRequest(BaseModel):
    """Request model for translating many texts to one language."""

    texts: list[str] = []
    target_language: str = Field(default="en", alias="targetLanguage")

    model_config = {"populate_by_name": True}


class BatchTranslationResponse(BaseModel):
    """Response model for batch translation."""

    results: list[TranslationResponse]
    count: int
    timestamp: datetime
