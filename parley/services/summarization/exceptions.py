"""Exceptions raised by the summarization service."""

from parley.core.errors import ServiceError


class MalformedInputError(ValueError):
    """A conversation turn lacks a field the summary needs."""

    pass


class SummarizationError(ServiceError):
    """Raised when a conversation cannot be summarized."""

    pass
