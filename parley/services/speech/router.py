"""FastAPI router for speech endpoints."""

import logging
from datetime import datetime, timezone
from typing import AsyncIterator

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect

from parley.services.health import ServiceHealth
from parley.services.speech.models import (
    DetectAudioLanguageRequest,
    DetectAudioLanguageResponse,
    SpeechToTextRequest,
    SpeechToTextResponse,
    StreamingTranscript,
)
from parley.services.speech.service import DEFAULT_LANGUAGE, speech_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["speech"])


@router.post("/speech-to-text", response_model=SpeechToTextResponse)
async def speech_to_text(request: SpeechToTextRequest) -> SpeechToTextResponse:
    """Transcribe a base64-encoded audio clip."""
    if not request.audio_data.strip():
        raise HTTPException(
            status_code=400,
            detail="Audio data is required for speech-to-text conversion",
        )

    return await speech_service.speech_to_text(request)


@router.post("/detect-audio-language", response_model=DetectAudioLanguageResponse)
async def detect_audio_language(
    request: DetectAudioLanguageRequest,
) -> DetectAudioLanguageResponse:
    """Detect the spoken language of a base64-encoded audio clip."""
    if not request.audio_data.strip():
        raise HTTPException(
            status_code=400, detail="Audio data is required for language detection"
        )

    language_code = await speech_service.detect_audio_language(request.audio_data)
    return DetectAudioLanguageResponse(
        language_code=language_code,
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/speech/health", response_model=ServiceHealth)
async def health_check() -> ServiceHealth:
    """Health check for the speech service."""
    return ServiceHealth(
        status="healthy",
        service="speech-to-text",
        timestamp=datetime.now(timezone.utc),
    )


@router.websocket("/speech/stream")
async def stream_speech(websocket: WebSocket, language_code: str = DEFAULT_LANGUAGE) -> None:
    """
    Live transcription over a WebSocket.

    The client sends raw LINEAR16 16 kHz audio as binary frames and
    receives {"transcript", "isFinal"} JSON messages. An empty binary frame
    ends the stream.
    """
    await websocket.accept()
    logger.info(f"Streaming transcription started ({language_code})")

    async def audio_chunks() -> AsyncIterator[bytes]:
        while True:
            chunk = await websocket.receive_bytes()
            if not chunk:
                return
            yield chunk

    try:
        async for transcript, is_final in speech_service.stream_transcripts(
            audio_chunks(), language_code
        ):
            message = StreamingTranscript(transcript=transcript, is_final=is_final)
            await websocket.send_json(message.model_dump(by_alias=True))
    except WebSocketDisconnect:
        logger.info("Streaming client disconnected")
        return
    except Exception as e:
        logger.exception(f"Streaming transcription failed: {e}")
        await websocket.close(code=1011, reason="Streaming transcription failed")
        return

    await websocket.close()
    logger.info("Streaming transcription finished")
