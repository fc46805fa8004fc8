"""Construction of the process-wide collaborators.

The entry point builds one AppContext and hands it to the tool layer; no
module creates clients at import time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from google import genai

from reflect_mcp.analysis import AnalysisRequester, GeminiModel, NotesAssistant
from reflect_mcp.config import get_config
from reflect_mcp.notes import NoteStore
from reflect_mcp.pipeline import LinkAnalysisPipeline
from reflect_mcp.providers import RequestsProvider

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Collaborators shared by the MCP tools."""

    pipeline: LinkAnalysisPipeline
    notes: NoteStore
    assistant: NotesAssistant
    concurrency: int


def create_genai_client(api_key: str) -> genai.Client | None:
    """Create the Gemini client, or None when no API key is configured."""
    if not api_key:
        logger.warning("GEMINI_API_KEY is not set; model calls will fail with ModelUnavailable")
        return None
    return genai.Client(api_key=api_key)


def build_app_context(**overrides: Any) -> AppContext:
    """Build the pipeline, note store and assistant from configuration.

    Args:
        **overrides: Config values taking precedence over the environment

    Returns:
        AppContext wired with fresh collaborators
    """

    def setting(key: str) -> Any:
        return overrides[key] if key in overrides else get_config(key)

    model = GeminiModel(create_genai_client(setting("gemini_api_key")), model=setting("model"))
    max_retries = setting("max_retries")

    pipeline = LinkAnalysisPipeline(
        provider=RequestsProvider(timeout=setting("fetch_timeout"), max_retries=max_retries),
        requester=AnalysisRequester(model, timeout=setting("model_timeout"), max_retries=max_retries),
        max_chars=setting("max_chars"),
        min_chars=setting("min_chars"),
    )

    logger.info(f"Link analysis pipeline ready (model={model.model}, max_retries={max_retries})")

    return AppContext(
        pipeline=pipeline,
        notes=NoteStore(setting("data_dir")),
        assistant=NotesAssistant(model),
        concurrency=setting("concurrency"),
    )
