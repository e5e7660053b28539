"""Parley: translation, speech-to-text and conversation summarization API."""
