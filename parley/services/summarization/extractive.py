"""Extractive conversation summarizer.

Builds the summary, key points and metadata by templating over the
recorded turns. Pure and synchronous: no I/O, no model calls.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Sequence, Union

from pydantic import ValidationError

from parley.services.summarization.exceptions import (
    MalformedInputError,
    SummarizationError,
)
from parley.services.summarization.models import (
    ConversationMessage,
    SummarizationResponse,
    SummaryFormat,
)

logger = logging.getLogger(__name__)

MessageInput = Union[ConversationMessage, Mapping[str, Any]]

MAX_KEY_POINTS = 5
PREVIEW_SIZE = 3

ROLE_LABELS = {
    "listener": "Listener",
    "speaker": "Speaker",
}

# Scanned in this order; each hit adds its label once
TOPIC_KEYWORDS = [
    ("when", "Discussed timing/schedule"),
    ("where", "Discussed location"),
    ("how", "Discussed methods/process"),
    ("why", "Discussed reasons/motivation"),
    ("what", "Discussed objectives/items"),
]


def coerce_messages(messages: Sequence[MessageInput]) -> list[ConversationMessage]:
    """
    Validate raw turns into ConversationMessage models.

    Raises:
        MalformedInputError: If a turn lacks a required field or has a bad value
    """
    turns = []
    for index, message in enumerate(messages):
        if isinstance(message, ConversationMessage):
            turns.append(message)
            continue
        try:
            turns.append(ConversationMessage.model_validate(message))
        except ValidationError as e:
            raise MalformedInputError(f"Message {index} is malformed: {e}") from e
    return turns


def extract_languages(messages: Sequence[ConversationMessage]) -> list[str]:
    """Unique detected languages in first-seen order."""
    return list(dict.fromkeys(msg.detected_language for msg in messages))


def count_participants(messages: Sequence[ConversationMessage]) -> int:
    """Number of distinct speaker roles present."""
    return len({msg.speaker for msg in messages})


def calculate_duration(messages: Sequence[ConversationMessage]) -> str:
    """Human-readable span between the first and last turn, as given."""
    if not messages:
        return "0 minutes"

    elapsed = messages[-1].timestamp - messages[0].timestamp
    minutes = elapsed // timedelta(minutes=1)

    if minutes < 1:
        return "< 1 minute"
    if minutes == 1:
        return "1 minute"
    return f"{minutes} minutes"


def _render_turn(message: ConversationMessage) -> str:
    return f"{ROLE_LABELS[message.speaker]}: {message.translated_text}"


def build_brief_summary(
    messages: Sequence[ConversationMessage], duration: str, languages: list[str]
) -> str:
    """One-sentence overview of the conversation."""
    if not messages:
        return "No conversation recorded."

    count = len(messages)
    noun = "message" if count == 1 else "messages"
    return (
        f"Conversation of {count} {noun} over {duration} "
        f"in {', '.join(languages)}."
    )


def build_detailed_summary(
    messages: Sequence[ConversationMessage],
    duration: str,
    languages: list[str],
    participant_count: int,
) -> str:
    """Labeled metadata block followed by first/last message previews."""
    total = len(messages)
    lines = [
        "Conversation Summary:",
        f"- Total Messages: {total}",
        f"- Duration: {duration}",
        f"- Languages: {', '.join(languages)}",
        f"- Participants: {participant_count}",
    ]

    preview = messages[:PREVIEW_SIZE]
    if preview:
        lines.append("")
        lines.append("First messages:")
        lines.extend(_render_turn(msg) for msg in preview)

    if total > PREVIEW_SIZE * 2:
        hidden = total - PREVIEW_SIZE * 2
        noun = "message" if hidden == 1 else "messages"
        lines.append("")
        lines.append(f"... ({hidden} more {noun}) ...")

    if total > PREVIEW_SIZE:
        # Never repeat a turn already shown in the first preview
        start = max(total - PREVIEW_SIZE, len(preview))
        lines.append("")
        lines.append("Last messages:")
        lines.extend(_render_turn(msg) for msg in messages[start:])

    return "\n".join(lines)


def extract_key_points(messages: Sequence[ConversationMessage]) -> list[str]:
    """Topic labels found in the translated text, or generic fallbacks."""
    text = " ".join(msg.translated_text for msg in messages).lower()

    key_points = [label for keyword, label in TOPIC_KEYWORDS if keyword in text]

    if not key_points:
        key_points = [
            f"{len(messages)} messages exchanged",
            "Multiple languages used",
        ]

    return key_points[:MAX_KEY_POINTS]


def summarize_conversation(
    messages: Sequence[MessageInput],
    format: SummaryFormat = "brief",
) -> SummarizationResponse:
    """
    Summarize a conversation without calling any model.

    Args:
        messages: Turns in chronological order; models or raw mappings
        format: "brief" for one sentence, "detailed" for a labeled block

    Returns:
        Summary, key points and conversation metadata

    Raises:
        SummarizationError: If any turn is malformed; no partial result
    """
    try:
        turns = coerce_messages(messages)

        languages = extract_languages(turns)
        participant_count = count_participants(turns)
        duration = calculate_duration(turns)

        if format == "detailed":
            summary = build_detailed_summary(turns, duration, languages, participant_count)
        else:
            summary = build_brief_summary(turns, duration, languages)

        key_points = extract_key_points(turns)
    except (MalformedInputError, TypeError, ValueError) as e:
        logger.error(f"Summarization failed: {e}")
        raise SummarizationError(f"Failed to summarize conversation: {e}") from e

    return SummarizationResponse(
        summary=summary,
        key_points=key_points,
        participant_count=participant_count,
        duration=duration,
        languages_detected=languages,
        timestamp=datetime.now(timezone.utc),
    )
