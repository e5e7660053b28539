"""Pydantic models for the summarization service."""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

SpeakerRole = Literal["listener", "speaker"]
SummaryFormat = Literal["brief", "detailed"]


class ConversationMessage(BaseModel):
    """One recorded turn of a translated conversation."""

    id: Optional[str] = None
    speaker: SpeakerRole
    original_text: str = Field(alias="originalText")
    translated_text: str = Field(alias="translatedText")
    detected_language: str = Field(alias="detectedLanguage")
    timestamp: datetime
    confidence: Optional[float] = None

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Read timestamps without an offset as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class SummarizationRequest(BaseModel):
    """Request model for conversation summarization."""

    messages: list[ConversationMessage] = []
    format: SummaryFormat = "brief"


class SummarizationResponse(BaseModel):
    """Response model for conversation summarization."""

    summary: str
    key_points: list[str] = Field(alias="keyPoints", max_length=5)
    participant_count: int = Field(alias="participantCount", ge=0)
    duration: str
    languages_detected: list[str] = Field(alias="languagesDetected")
    timestamp: datetime

    model_config = {"populate_by_name": True}
