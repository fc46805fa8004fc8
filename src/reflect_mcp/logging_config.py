"""Logging setup for the server process."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"

# Libraries that log every request at INFO
_NOISY_LOGGERS = ["httpx", "httpcore", "urllib3", "requests", "google_genai", "mcp.server.lowlevel"]


def configure_logging(log_level: str = "INFO") -> None:
    """Configure root logging and quiet third-party loggers.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
