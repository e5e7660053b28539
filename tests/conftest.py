"""Shared fixtures for Parley tests."""

from datetime import datetime, timedelta, timezone

import httpx
import pytest

from parley.services.summarization.models import ConversationMessage

BASE_TIME = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
LANGUAGE_CYCLE = ["en", "es", "fr"]


def make_message(
    index: int = 0,
    speaker: str = "speaker",
    translated_text: str | None = None,
    detected_language: str = "en",
    offset_seconds: float = 0,
) -> ConversationMessage:
    """Shorthand factory for a single conversation turn."""
    return ConversationMessage(
        speaker=speaker,
        original_text=f"Message {index}",
        translated_text=translated_text if translated_text is not None else f"Translated message {index}",
        detected_language=detected_language,
        timestamp=BASE_TIME + timedelta(seconds=offset_seconds),
    )


def make_conversation(count: int) -> list[ConversationMessage]:
    """Alternating speakers, cycling en/es/fr, one minute apart."""
    return [
        make_message(
            index=i,
            speaker="speaker" if i % 2 == 0 else "listener",
            detected_language=LANGUAGE_CYCLE[i % 3],
            offset_seconds=i * 60,
        )
        for i in range(count)
    ]


@pytest.fixture
def message_factory():
    """Return the make_message helper."""
    return make_message


@pytest.fixture
def conversation_factory():
    """Return the make_conversation helper."""
    return make_conversation


@pytest.fixture
def app():
    """Return the Parley FastAPI application."""
    from parley.main import app as parley_app

    return parley_app


@pytest.fixture
async def async_client(app):
    """Return an httpx AsyncClient configured with the Parley app."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as client:
        yield client
