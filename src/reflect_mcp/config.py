"""Runtime configuration seeded from environment variables."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_DATA_DIR = str(Path.home() / ".local" / "share" / "reflect-ai")

# Default concurrency limit for batch link analysis
DEFAULT_CONCURRENCY = 4

_DEFAULTS: dict[str, Any] = {
    "gemini_api_key": "",
    "model": DEFAULT_MODEL,
    "fetch_timeout": 30,
    "model_timeout": 60,
    "max_retries": 0,
    "max_chars": 15000,
    "min_chars": 50,
    "concurrency": DEFAULT_CONCURRENCY,
    "data_dir": DEFAULT_DATA_DIR,
    "log_level": "INFO",
}

# Environment variable -> config key
_ENV_KEYS: dict[str, str] = {
    "REFLECT_MODEL": "model",
    "REFLECT_FETCH_TIMEOUT": "fetch_timeout",
    "REFLECT_MODEL_TIMEOUT": "model_timeout",
    "REFLECT_MAX_RETRIES": "max_retries",
    "REFLECT_MAX_CHARS": "max_chars",
    "REFLECT_MIN_CHARS": "min_chars",
    "REFLECT_CONCURRENCY": "concurrency",
    "REFLECT_DATA_DIR": "data_dir",
    "REFLECT_LOG_LEVEL": "log_level",
}

_runtime_config: dict[str, Any] = {}


def load_config() -> dict[str, Any]:
    """(Re)load configuration from the environment.

    Integer settings that fail to parse keep their default and log a warning.

    Returns:
        The runtime configuration dictionary
    """
    config = dict(_DEFAULTS)
    config["gemini_api_key"] = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or ""

    for env_name, key in _ENV_KEYS.items():
        raw = os.getenv(env_name)
        if raw is None or raw == "":
            continue
        if isinstance(_DEFAULTS[key], int):
            try:
                config[key] = int(raw)
            except ValueError:
                logger.warning(f"Ignoring {env_name}={raw!r}: expected an integer")
        else:
            config[key] = raw

    _runtime_config.clear()
    _runtime_config.update(config)
    return _runtime_config


def get_config(key: str, default: Any = None) -> Any:
    """Get a configuration value.

    Args:
        key: Configuration key
        default: Default value if key not found

    Returns:
        Configuration value or default
    """
    if not _runtime_config:
        load_config()
    return _runtime_config.get(key, default)


def get_current_config() -> dict[str, Any]:
    """Get the current configuration with the API key redacted.

    Returns:
        Dictionary with current config and defaults
    """
    if not _runtime_config:
        load_config()
    config = dict(_runtime_config)
    config["gemini_api_key"] = "***" if config.get("gemini_api_key") else ""
    return {
        "config": config,
        "defaults": {k: v for k, v in _DEFAULTS.items() if k != "gemini_api_key"},
    }
