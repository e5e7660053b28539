"""Logging configuration for Parley."""

import logging
import sys

from parley.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Provider SDKs and transports that log every request at INFO/DEBUG
PROVIDER_LOGGERS = (
    "httpx",
    "httpcore",
    "google.auth",
    "google.api_core",
    "google_genai",
    "grpc",
    "openai",
)


def resolve_log_level(level_name: str, debug: bool = False) -> int:
    """
    Turn LOG_LEVEL into a logging level, with DEBUG=true forcing debug output.

    Raises:
        ValueError: If the level name is not a standard logging level
    """
    if debug:
        return logging.DEBUG

    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown LOG_LEVEL: {level_name}")
    return level


def setup_logging() -> None:
    """Send application logs to stdout and keep provider SDKs at WARNING."""
    logging.basicConfig(
        level=resolve_log_level(settings.log_level, settings.debug),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in PROVIDER_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
