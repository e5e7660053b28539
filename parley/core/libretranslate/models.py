"""Pydantic models for LibreTranslate API payloads."""

from typing import Optional

from pydantic import BaseModel, Field


class Detection(BaseModel):
    """A single language detection candidate."""

    language: str
    confidence: float = 0.0


class TranslateResult(BaseModel):
    """Result from the LibreTranslate translate endpoint."""

    translated_text: str = Field(alias="translatedText")
    detected_language: Optional[Detection] = Field(default=None, alias="detectedLanguage")

    model_config = {"populate_by_name": True}


class Language(BaseModel):
    """Language entry from the LibreTranslate languages endpoint."""

    code: str
    name: str
    targets: list[str] = []
