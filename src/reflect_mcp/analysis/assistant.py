"""Question answering over the user's notes."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from reflect_mcp.analysis.prompts import build_assistant_prompt
from reflect_mcp.analysis.requester import AnalysisModel
from reflect_mcp.errors import ModelUnavailable
from reflect_mcp.models.notes import Note

logger = logging.getLogger(__name__)

UNAVAILABLE_REPLY = (
    "I'm having trouble connecting to the AI right now. "
    "Please check your internet connection or API key."
)


class NotesAssistant:
    """Forwards a question plus note context to the model."""

    def __init__(self, model: AnalysisModel) -> None:
        self.model = model

    async def ask(self, query: str, notes: Sequence[Note]) -> str:
        """Answer ``query`` using ``notes`` as context.

        Provider failures produce a fixed apology instead of an error.
        """
        prompt = build_assistant_prompt(query, notes)
        try:
            return await self.model.generate(prompt)
        except ModelUnavailable as e:
            logger.warning(f"Assistant model unavailable: {e}")
            return UNAVAILABLE_REPLY
