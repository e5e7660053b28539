"""Pydantic models for the speech service."""

from datetime import datetime

from pydantic import BaseModel, Field


class SpeechToTextRequest(BaseModel):
    """Request model for transcribing an audio clip."""

    audio_data: str = Field(default="", alias="audioData")  # Base64 encoded
    encoding: str = "LINEAR16"
    sample_rate_hertz: int = Field(default=16000, alias="sampleRateHertz", gt=0)
    language_code: str = Field(default="en-US", alias="languageCode")

    model_config = {"populate_by_name": True}


class SpeechToTextResponse(BaseModel):
    """Response model for a transcription."""

    transcript: str
    confidence: float
    detected_language: str = Field(alias="detectedLanguage")
    timestamp: datetime

    model_config = {"populate_by_name": True}


class DetectAudioLanguageRequest(BaseModel):
    """Request model for spoken language detection."""

    audio_data: str = Field(default="", alias="audioData")

    model_config = {"populate_by_name": True}


class DetectAudioLanguageResponse(BaseModel):
    """Response model for spoken language detection."""

    language_code: str = Field(alias="languageCode")
    timestamp: datetime

    model_config = {"populate_by_name": True}


class StreamingTranscript(BaseModel):
    """One interim or final result pushed over the streaming socket."""

    transcript: str
    is_final: bool = Field(alias="isFinal")

    model_config = {"populate_by_name": True}
