"""Tests for parley.services.summarization.extractive."""

from datetime import datetime, timezone

import pytest

from parley.services.summarization.exceptions import (
    MalformedInputError,
    SummarizationError,
)
from parley.services.summarization.extractive import (
    calculate_duration,
    coerce_messages,
    count_participants,
    extract_key_points,
    extract_languages,
    summarize_conversation,
)


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


class TestLanguages:
    def test_unique_in_first_seen_order(self, message_factory):
        messages = [
            message_factory(detected_language="es"),
            message_factory(detected_language="en"),
            message_factory(detected_language="es"),
            message_factory(detected_language="fr"),
            message_factory(detected_language="en"),
        ]
        assert extract_languages(messages) == ["es", "en", "fr"]

    def test_empty(self):
        assert extract_languages([]) == []


class TestParticipants:
    def test_counts_distinct_roles(self, message_factory):
        messages = [
            message_factory(speaker="speaker"),
            message_factory(speaker="speaker"),
            message_factory(speaker="listener"),
        ]
        assert count_participants(messages) == 2

    def test_single_role(self, message_factory):
        messages = [message_factory(speaker="listener"), message_factory(speaker="listener")]
        assert count_participants(messages) == 1

    def test_empty(self):
        assert count_participants([]) == 0


class TestDuration:
    def _pair(self, message_factory, seconds):
        return [
            message_factory(offset_seconds=0),
            message_factory(speaker="listener", offset_seconds=seconds),
        ]

    def test_thirty_seconds(self, message_factory):
        assert calculate_duration(self._pair(message_factory, 30)) == "< 1 minute"

    def test_exactly_one_minute(self, message_factory):
        assert calculate_duration(self._pair(message_factory, 60)) == "1 minute"

    def test_five_minutes(self, message_factory):
        assert calculate_duration(self._pair(message_factory, 300)) == "5 minutes"

    def test_partial_minutes_are_floored(self, message_factory):
        assert calculate_duration(self._pair(message_factory, 179)) == "2 minutes"

    def test_empty(self):
        assert calculate_duration([]) == "0 minutes"

    def test_single_message(self, message_factory):
        assert calculate_duration([message_factory()]) == "< 1 minute"

    def test_uses_array_order_not_timestamps(self, message_factory):
        # Last element is earlier than the first: negative span
        messages = [
            message_factory(offset_seconds=600),
            message_factory(offset_seconds=0),
            message_factory(offset_seconds=1200),
            message_factory(offset_seconds=300),
        ]
        assert calculate_duration(messages) == "< 1 minute"

    def test_timestamps_without_offset_are_utc(self):
        def raw(timestamp: str) -> dict:
            return {
                "speaker": "speaker",
                "originalText": "Hi",
                "translatedText": "Hi",
                "detectedLanguage": "en",
                "timestamp": timestamp,
            }

        messages = coerce_messages(
            [raw("2026-03-01T00:00:00Z"), raw("2026-03-01T00:05:00")]
        )
        assert messages[1].timestamp.tzinfo is not None
        assert calculate_duration(messages) == "5 minutes"


# ---------------------------------------------------------------------------
# Key points
# ---------------------------------------------------------------------------


class TestKeyPoints:
    def test_question_words(self, message_factory):
        messages = [
            message_factory(translated_text="When should we meet?"),
            message_factory(translated_text="Where is the location?"),
            message_factory(translated_text="How do we get there?"),
        ]
        assert extract_key_points(messages) == [
            "Discussed timing/schedule",
            "Discussed location",
            "Discussed methods/process",
        ]

    def test_all_keywords_in_fixed_order(self, message_factory):
        messages = [message_factory(translated_text="What why how where when who")]
        assert extract_key_points(messages) == [
            "Discussed timing/schedule",
            "Discussed location",
            "Discussed methods/process",
            "Discussed reasons/motivation",
            "Discussed objectives/items",
        ]

    def test_never_more_than_five(self, message_factory):
        messages = [message_factory(translated_text="When where how why what who")]
        assert len(extract_key_points(messages)) <= 5

    def test_substring_match(self, message_factory):
        # "somewhere" contains "where", "showing" contains "how"
        messages = [message_factory(translated_text="Somewhere, showing")]
        assert extract_key_points(messages) == [
            "Discussed location",
            "Discussed methods/process",
        ]

    def test_only_translated_text_is_scanned(self, message_factory):
        message = message_factory(translated_text="Hello").model_copy(
            update={"original_text": "When and where?"}
        )
        assert extract_key_points([message]) == [
            "1 messages exchanged",
            "Multiple languages used",
        ]

    def test_fallback(self, message_factory):
        messages = [
            message_factory(translated_text="Hello"),
            message_factory(translated_text="Hi", detected_language="es"),
        ]
        assert extract_key_points(messages) == [
            "2 messages exchanged",
            "Multiple languages used",
        ]

    def test_fallback_for_empty_conversation(self):
        assert extract_key_points([]) == [
            "0 messages exchanged",
            "Multiple languages used",
        ]


# ---------------------------------------------------------------------------
# summarize_conversation
# ---------------------------------------------------------------------------


class TestBriefSummary:
    def test_empty_conversation(self):
        result = summarize_conversation([], "brief")
        assert "No conversation recorded" in result.summary
        assert result.participant_count == 0
        assert result.duration == "0 minutes"
        assert result.languages_detected == []

    def test_five_messages(self, conversation_factory):
        result = summarize_conversation(conversation_factory(5), "brief")
        assert "5 messages" in result.summary
        assert "4 minutes" in result.summary
        assert "en, es, fr" in result.summary
        assert result.participant_count == 2
        assert result.languages_detected == ["en", "es", "fr"]

    def test_single_message_is_singular(self, message_factory):
        result = summarize_conversation([message_factory()], "brief")
        assert "1 message " in result.summary
        assert "1 messages" not in result.summary
        assert result.participant_count == 1

    def test_defaults_to_brief(self, conversation_factory):
        result = summarize_conversation(conversation_factory(3))
        assert "Conversation Summary:" not in result.summary
        assert "3 messages" in result.summary

    def test_timestamp_is_not_in_future(self, conversation_factory):
        result = summarize_conversation(conversation_factory(2))
        assert result.timestamp <= datetime.now(timezone.utc)


class TestDetailedSummary:
    def test_ten_messages(self, conversation_factory):
        result = summarize_conversation(conversation_factory(10), "detailed")
        summary = result.summary

        assert "Conversation Summary" in summary
        assert "Total Messages: 10" in summary
        assert "Duration: 9 minutes" in summary
        assert "Languages: en, es, fr" in summary
        assert "Participants: 2" in summary
        assert "First messages" in summary
        assert "Last messages" in summary
        assert "Speaker: Translated message 0" in summary
        assert "Translated message 9" in summary
        assert "(4 more messages)" in summary

    def test_previews_skip_the_middle(self, conversation_factory):
        summary = summarize_conversation(conversation_factory(10), "detailed").summary
        for i in (3, 4, 5, 6):
            assert f"Translated message {i}\n" not in summary
            assert not summary.endswith(f"Translated message {i}")

    def test_role_labels(self, conversation_factory):
        summary = summarize_conversation(conversation_factory(2), "detailed").summary
        assert "Speaker: Translated message 0" in summary
        assert "Listener: Translated message 1" in summary

    def test_three_messages_has_no_last_section(self, conversation_factory):
        summary = summarize_conversation(conversation_factory(3), "detailed").summary
        assert "First messages" in summary
        assert "Last messages" not in summary
        assert "more message" not in summary

    @pytest.mark.parametrize("count", [4, 5, 6])
    def test_short_conversations_do_not_overlap(self, conversation_factory, count):
        summary = summarize_conversation(conversation_factory(count), "detailed").summary
        assert "more message" not in summary
        for i in range(count):
            assert summary.count(f"Translated message {i}") == 1

    def test_seven_messages_elide_one(self, conversation_factory):
        summary = summarize_conversation(conversation_factory(7), "detailed").summary
        assert "... (1 more message) ..." in summary
        assert "Translated message 3" not in summary

    def test_empty_conversation(self):
        summary = summarize_conversation([], "detailed").summary
        assert "Total Messages: 0" in summary
        assert "Duration: 0 minutes" in summary
        assert "First messages" not in summary


class TestMalformedInput:
    def test_missing_timestamp_fails(self):
        with pytest.raises(SummarizationError, match="Failed to summarize conversation"):
            summarize_conversation([{"speaker": "speaker"}], "brief")

    def test_cause_is_chained(self):
        with pytest.raises(SummarizationError) as exc_info:
            summarize_conversation(
                [
                    {
                        "speaker": "speaker",
                        "originalText": "Hi",
                        "translatedText": "Hola",
                        "detectedLanguage": "en",
                    }
                ]
            )
        assert isinstance(exc_info.value.__cause__, MalformedInputError)

    def test_unknown_speaker_fails(self):
        with pytest.raises(SummarizationError):
            summarize_conversation(
                [
                    {
                        "speaker": "narrator",
                        "originalText": "Hi",
                        "translatedText": "Hi",
                        "detectedLanguage": "en",
                        "timestamp": "2026-03-01T12:00:00Z",
                    }
                ]
            )

    def test_raw_mappings_are_accepted(self):
        result = summarize_conversation(
            [
                {
                    "speaker": "speaker",
                    "originalText": "Hola",
                    "translatedText": "Hello",
                    "detectedLanguage": "es",
                    "timestamp": "2026-03-01T12:00:00Z",
                },
                {
                    "speaker": "listener",
                    "originalText": "Where?",
                    "translatedText": "Where?",
                    "detectedLanguage": "en",
                    "timestamp": "2026-03-01T12:02:30Z",
                },
            ]
        )
        assert result.duration == "2 minutes"
        assert result.languages_detected == ["es", "en"]
        assert result.key_points == ["Discussed location"]

    def test_coerce_reports_message_index(self, message_factory):
        with pytest.raises(MalformedInputError, match="Message 1"):
            coerce_messages([message_factory(), {"speaker": "listener"}])

    def test_input_is_not_mutated(self, conversation_factory):
        messages = conversation_factory(4)
        snapshot = list(messages)
        summarize_conversation(messages, "detailed")
        assert messages == snapshot
